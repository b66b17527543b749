from __future__ import annotations

from dataclasses import dataclass

from pdf_indexer.config import Settings
from pdf_indexer.embeddings_client import EmbeddingsClient
from pdf_indexer.extract import PdfTextExtractor
from pdf_indexer.llm_client import LLMClient
from pdf_indexer.orchestrator import IngestionOrchestrator
from pdf_indexer.source import DocumentSource
from pdf_indexer.vector_index import PineconeIndexClient


@dataclass(frozen=True)
class App:
    settings: Settings
    orchestrator: IngestionOrchestrator
    llm: LLMClient


def build_app(settings: Settings) -> App:
    """
    Construct and authorize every process-wide client once.
    Raises ConfigurationError if a client cannot be authorized.
    """
    embedder = EmbeddingsClient(
        api_key=settings.openai_api_key,
        model=settings.openai_embedding_model,
        timeout_s=settings.request_timeout_s,
    )
    embedder.authorize()

    index = PineconeIndexClient(
        api_key=settings.pinecone_api_key,
        index_name=settings.pinecone_index_name,
        timeout_s=settings.request_timeout_s,
    )
    index.authorize()

    llm = LLMClient(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout_s=settings.request_timeout_s,
    )
    llm.authorize()

    orchestrator = IngestionOrchestrator(
        source=DocumentSource(settings.docs_dir),
        extractor=PdfTextExtractor(),
        embedder=embedder,
        index=index,
        max_attempts=settings.embed_max_attempts,
        retry_delay_ms=settings.embed_retry_delay_ms,
        embedding_dimension=settings.embedding_dimension,
        seed_top_k=settings.seed_top_k,
    )
    return App(settings=settings, orchestrator=orchestrator, llm=llm)

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, List

from pdf_indexer.embeddings_client import EmbeddingsClient
from pdf_indexer.errors import ClientNotAuthorizedError, EmbeddingError, ExtractionError, StoreError
from pdf_indexer.extract import PdfTextExtractor
from pdf_indexer.models import Document, QueryMatch, Record, RunSummary
from pdf_indexer.retry import retry_call
from pdf_indexer.source import DocumentSource
from pdf_indexer.vector_index import PineconeIndexClient
from pdf_indexer.vector_io import build_record
from pdf_indexer.vector_text import clean_text

log = logging.getLogger("pdf_indexer.orchestrator")


def probe_vector(dimension: int) -> List[float]:
    """
    Unit vector used to pull an arbitrary top-k slice out of the index.
    Pinecone rejects all-zero query vectors.
    """
    return [1.0] + [0.0] * (dimension - 1)


class IngestionOrchestrator:
    """
    Drives ingestion runs: list -> extract -> clean -> embed (with retry) -> upsert.

    Documents are processed strictly one after another. A failure in any
    stage skips that document only; run() never raises. Only one run may be
    in progress at a time, whoever triggers it.
    """

    def __init__(
        self,
        source: DocumentSource,
        extractor: PdfTextExtractor,
        embedder: EmbeddingsClient,
        index: PineconeIndexClient,
        *,
        max_attempts: int = 5,
        retry_delay_ms: int = 5000,
        embedding_dimension: int = 1536,
        seed_top_k: int = 100,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.source = source
        self.extractor = extractor
        self.embedder = embedder
        self.index = index
        self.max_attempts = max_attempts
        self.retry_delay_ms = retry_delay_ms
        self.embedding_dimension = embedding_dimension
        self.seed_top_k = seed_top_k
        self._sleep = sleep

        self._run_lock = threading.Lock()
        self.records: List[QueryMatch] = []

    @property
    def is_running(self) -> bool:
        return self._run_lock.locked()

    def seed_records(self) -> List[QueryMatch]:
        """
        Load up to seed_top_k existing records into the in-memory cache.
        """
        try:
            self.records = self.index.query(
                probe_vector(self.embedding_dimension),
                top_k=self.seed_top_k,
                include_metadata=True,
                include_values=True,
            )
        except StoreError as e:
            log.error("Failed to load existing records: %s", e)
            self.records = []
        log.info("Loaded %d existing records", len(self.records))
        return self.records

    def run(self) -> RunSummary:
        if not self._run_lock.acquire(blocking=False):
            log.warning("Ingestion run already in progress; skipping this trigger")
            return RunSummary(skipped_busy=True)

        try:
            return self._run_locked()
        finally:
            self._run_lock.release()

    def _run_locked(self) -> RunSummary:
        summary = RunSummary()
        try:
            docs = self.source.list_documents()
        except Exception:
            log.exception("Failed to list documents; treating as an empty run")
            docs = []
        summary.listed = len(docs)
        log.info("Starting ingestion run over %d documents", len(docs))

        for doc in docs:
            try:
                record = self.process_document(doc)
            except ExtractionError as e:
                log.warning("Skipping %s: %s", doc.name, e)
            except (EmbeddingError, StoreError, ClientNotAuthorizedError) as e:
                log.error("Skipping %s: %s", doc.name, e)
            except Exception:
                log.exception("Unexpected error while processing %s", doc.name)
            else:
                summary.upserted += 1
                summary.upserted_ids.append(record.id)
                continue

            summary.skipped += 1
            summary.failed_names.append(doc.name)

        log.debug("Processing complete!")
        log.info(
            "Ingestion run finished: listed=%d upserted=%d skipped=%d",
            summary.listed,
            summary.upserted,
            summary.skipped,
        )
        return summary

    def process_document(self, doc: Document) -> Record:
        """
        Run one document through every stage and upsert it.
        Raises ExtractionError / EmbeddingError / StoreError on failure.
        """
        extracted = self.extractor.extract(doc.content)
        log.info("Extracted text length for %s: %d", doc.name, len(extracted or ""))

        text = clean_text(extracted)
        if not text:
            raise ExtractionError("no text could be extracted")

        vector = self.generate_embedding(text)

        record = build_record(doc.name, extracted, vector)
        log.info("Adding record with ID: %s", record.id)
        self.index.upsert(record)
        return record

    def generate_embedding(self, text: str) -> List[float]:
        """
        Embed text, retrying only failures of the embedding service itself.
        Invalid input (ValueError) and an unauthorized client surface on the
        first attempt.
        """
        try:
            return retry_call(
                lambda: self.embedder.embed_text(text),
                max_attempts=self.max_attempts,
                delay_ms=self.retry_delay_ms,
                sleep=self._sleep,
                label="embedding generation",
                retry_on=EmbeddingError,
            )
        except EmbeddingError as e:
            raise EmbeddingError(
                f"failed to generate embeddings after {self.max_attempts} attempts: {e}"
            ) from e

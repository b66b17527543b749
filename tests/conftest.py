"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

import pytest

from pdf_indexer.errors import EmbeddingError, StoreError
from pdf_indexer.models import Document, QueryMatch, Record
from pdf_indexer.orchestrator import IngestionOrchestrator


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


class FakeSource:
    def __init__(self, docs: List[Document]) -> None:
        self.docs = docs

    def list_documents(self) -> List[Document]:
        return list(self.docs)


class FakeExtractor:
    """Decodes bytes as UTF-8 text; a mapping can override per payload."""

    def __init__(self, overrides: Optional[Dict[bytes, str]] = None) -> None:
        self.overrides = overrides or {}
        self.calls: List[bytes] = []

    def extract(self, content: bytes) -> str:
        self.calls.append(content)
        if content in self.overrides:
            return self.overrides[content]
        return content.decode("utf-8")


class FakeEmbedder:
    """
    Returns a deterministic vector unless `fail` says otherwise for the
    (text, attempt) pair.
    """

    def __init__(self, fail: Optional[Callable[[str, int], bool]] = None) -> None:
        self.fail = fail or (lambda text, attempt: False)
        self.calls: List[str] = []

    def embed_text(self, text: str) -> List[float]:
        self.calls.append(text)
        if not text or not isinstance(text, str):
            raise ValueError("Input text must be a non-empty string")
        attempt = sum(1 for t in self.calls if t == text)
        if self.fail(text, attempt):
            raise EmbeddingError(f"boom on attempt {attempt}")
        return [float(len(text)), 0.5, 0.25]


class FakeIndex:
    def __init__(self, fail_ids: Optional[Callable[[Record], bool]] = None) -> None:
        self.upserted: List[Record] = []
        self.fail = fail_ids or (lambda record: False)
        self.queries: List[dict] = []
        self.matches: List[QueryMatch] = []

    def upsert(self, record: Record) -> None:
        if self.fail(record):
            raise StoreError(f"upsert of {record.id} rejected")
        self.upserted.append(record)

    def query(self, vector, top_k=10, include_metadata=True, include_values=False) -> List[QueryMatch]:
        self.queries.append(
            {
                "vector": vector,
                "top_k": top_k,
                "include_metadata": include_metadata,
                "include_values": include_values,
            }
        )
        return list(self.matches)


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def make_docs(*texts: str) -> List[Document]:
    return [Document(name=f"doc{i + 1}.pdf", content=t.encode("utf-8")) for i, t in enumerate(texts)]


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def fake_index() -> FakeIndex:
    return FakeIndex()


@pytest.fixture
def build_orchestrator(sleep_recorder: SleepRecorder, fake_index: FakeIndex):
    def _build(docs: List[Document], embedder: Optional[FakeEmbedder] = None, extractor=None, index=None):
        return IngestionOrchestrator(
            source=FakeSource(docs),
            extractor=extractor or FakeExtractor(),
            embedder=embedder or FakeEmbedder(),
            index=index or fake_index,
            max_attempts=5,
            retry_delay_ms=5000,
            embedding_dimension=3,
            seed_top_k=100,
            sleep=sleep_recorder,
        )

    return _build

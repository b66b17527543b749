"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from pdf_indexer.config import load_settings
from pdf_indexer.errors import ConfigurationError

_VARS = (
    "OPENAI_API_KEY",
    "PINECONE_API_KEY",
    "PINECONE_INDEX_NAME",
    "INGEST_CRON",
    "EMBED_MAX_ATTEMPTS",
    "EMBED_RETRY_DELAY_MS",
    "DOCS_DIR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so anything load_dotenv writes is undone after the test
    for name in _VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def _no_env_file(tmp_path: Path) -> Path:
    return tmp_path / "missing.env"


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("PINECONE_API_KEY", "pc-test")
    monkeypatch.setenv("PINECONE_INDEX_NAME", "docs")

    s = load_settings(_no_env_file(tmp_path))

    assert s.openai_embedding_model == "text-embedding-ada-002"
    assert s.ingest_cron == "0 */12 * * *"
    assert s.embed_max_attempts == 5
    assert s.embed_retry_delay_ms == 5000
    assert s.seed_top_k == 100
    assert s.docs_dir == Path.cwd() / "docs"


@pytest.mark.parametrize("missing", ["OPENAI_API_KEY", "PINECONE_API_KEY", "PINECONE_INDEX_NAME"])
def test_missing_required_value_is_fatal(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, missing: str) -> None:
    for name, value in (("OPENAI_API_KEY", "sk"), ("PINECONE_API_KEY", "pc"), ("PINECONE_INDEX_NAME", "docs")):
        if name != missing:
            monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError, match="PINECONE_INDEX_NAME"):
        load_settings(_no_env_file(tmp_path))


def test_env_file_and_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "OPENAI_API_KEY=sk-file\nPINECONE_API_KEY=pc-file\nPINECONE_INDEX_NAME=from-file\nINGEST_CRON=*/5 * * * *\n"
    )
    monkeypatch.setenv("PINECONE_INDEX_NAME", "from-env")
    monkeypatch.setenv("DOCS_DIR", str(tmp_path))

    s = load_settings(env_file)

    assert s.openai_api_key == "sk-file"
    assert s.pinecone_index_name == "from-env"
    assert s.ingest_cron == "*/5 * * * *"
    assert s.docs_dir == tmp_path

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from pdf_indexer.errors import ConfigurationError


def _project_root() -> Path:
    """
    Resolve project root assuming this file lives in: <root>/src/pdf_indexer/config.py
    """
    return Path(__file__).resolve().parents[2]


class Settings(BaseModel):
    # --- Required ---
    openai_api_key: str = Field(..., min_length=1, description="OpenAI API key")
    pinecone_api_key: str = Field(..., min_length=1, description="Pinecone API key")
    pinecone_index_name: str = Field(..., min_length=1, description="Pinecone index to write into")

    # --- Optional / defaults ---
    openai_model: str = Field(default="chatgpt-4o-latest")
    openai_embedding_model: str = Field(default="text-embedding-ada-002")
    embedding_dimension: int = Field(default=1536, gt=0)

    docs_dir: Path = Field(default_factory=lambda: Path.cwd() / "docs")
    ingest_cron: str = Field(default="0 */12 * * *", description="Crontab expression for scheduled runs")

    embed_max_attempts: int = Field(default=5, ge=1)
    embed_retry_delay_ms: int = Field(default=5000, ge=0)
    request_timeout_s: float = Field(default=60.0, gt=0)
    seed_top_k: int = Field(default=100, ge=1)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Loads environment variables (optionally from .env) and validates Settings.

    Raises ConfigurationError when a required variable is missing, so the
    process halts before any ingestion run can start.
    """
    if env_file is None:
        env_file = _project_root() / ".env"

    # Load .env if present; environment variables override .env by default
    if env_file.exists():
        load_dotenv(env_file, override=False)

    data = {
        "openai_api_key": os.getenv("OPENAI_API_KEY", ""),
        "pinecone_api_key": os.getenv("PINECONE_API_KEY", ""),
        "pinecone_index_name": os.getenv("PINECONE_INDEX_NAME", ""),
        "openai_model": os.getenv("OPENAI_MODEL", "chatgpt-4o-latest"),
        "openai_embedding_model": os.getenv("OPENAI_EMBEDDING_MODEL", "text-embedding-ada-002"),
        "embedding_dimension": os.getenv("EMBEDDING_DIMENSION", "1536"),
        "docs_dir": os.getenv("DOCS_DIR", str(Path.cwd() / "docs")),
        "ingest_cron": os.getenv("INGEST_CRON", "0 */12 * * *"),
        "embed_max_attempts": os.getenv("EMBED_MAX_ATTEMPTS", "5"),
        "embed_retry_delay_ms": os.getenv("EMBED_RETRY_DELAY_MS", "5000"),
        "request_timeout_s": os.getenv("REQUEST_TIMEOUT_S", "60"),
        "seed_top_k": os.getenv("SEED_TOP_K", "100"),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
    }

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration. Ensure required environment variables are set.\n"
            "Required: OPENAI_API_KEY, PINECONE_API_KEY, PINECONE_INDEX_NAME\n"
            f"Details:\n{e}"
        ) from e

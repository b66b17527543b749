from __future__ import annotations

import logging
from typing import List, Optional

from openai import OpenAI

from pdf_indexer.errors import ClientNotAuthorizedError, ConfigurationError, EmbeddingError
from pdf_indexer.vector_text import clean_text

log = logging.getLogger("pdf_indexer.embeddings")


class EmbeddingsClient:
    """
    Thin wrapper for generating embeddings.
    Retrying is left to the caller; one call here is one request.
    """

    def __init__(self, api_key: str, model: str, timeout_s: Optional[float] = None) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout_s = timeout_s
        self._client: Optional[OpenAI] = None

    @property
    def model(self) -> str:
        return self._model

    def authorize(self) -> None:
        if not self._api_key:
            log.error("OpenAI API key not configured")
            raise ConfigurationError("OpenAI API key is not set")
        self._client = OpenAI(api_key=self._api_key, timeout=self._timeout_s)

    def embed_text(self, text: str) -> List[float]:
        """
        Generate a single embedding vector for the given text.
        Raises ValueError on empty input, EmbeddingError if the service fails.
        """
        if not text or not isinstance(text, str):
            raise ValueError("Input text must be a non-empty string")
        if self._client is None:
            raise ClientNotAuthorizedError("Embeddings client used before authorize()")

        cleaned = clean_text(text)
        log.debug("Embedding text (%d chars)", len(cleaned))

        try:
            resp = self._client.embeddings.create(
                model=self._model,
                input=cleaned,
            )
        except Exception as e:
            raise EmbeddingError(f"Error while fetching embedding: {e}") from e

        try:
            vector = resp.data[0].embedding
        except (AttributeError, IndexError, TypeError) as e:
            raise EmbeddingError("Invalid embedding response") from e

        if not vector:
            raise EmbeddingError("No embeddings received")
        return list(vector)

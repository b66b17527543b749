from __future__ import annotations

import logging
from typing import Any, List, Optional

from pinecone import Index, Pinecone
from pydantic import ValidationError

from pdf_indexer.errors import ConfigurationError, StoreError
from pdf_indexer.models import QueryMatch, Record

log = logging.getLogger("pdf_indexer.vector_index")


def _field(obj: Any, name: str, default: Any = None) -> Any:
    # responses may be SDK objects or plain dicts
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


class PineconeIndexClient:
    """
    Writes and queries records in a single Pinecone index.
    """

    def __init__(self, api_key: str, index_name: str, timeout_s: Optional[float] = None) -> None:
        self._api_key = api_key
        self.index_name = index_name
        self._timeout_s = timeout_s
        self._index: Optional[Index] = None

    def authorize(self) -> None:
        if not self._api_key:
            raise ConfigurationError("Pinecone API key is not set")
        if not self.index_name:
            raise ConfigurationError("Pinecone index name is not set")

        pc = Pinecone(api_key=self._api_key)
        self._index = pc.Index(self.index_name)
        log.info("Connected to Pinecone index %s", self.index_name)

    def _require_index(self) -> Index:
        if self._index is None:
            raise StoreError("Pinecone client used before authorize()")
        return self._index

    def _request_kwargs(self) -> dict:
        if self._timeout_s is None:
            return {}
        return {"_request_timeout": self._timeout_s}

    def upsert(self, record: Record) -> None:
        index = self._require_index()
        try:
            index.upsert(vectors=[record.to_index_payload()], **self._request_kwargs())
        except Exception as e:
            raise StoreError(f"Upsert of {record.id} failed: {e}") from e

    def query(
        self,
        vector: List[float],
        top_k: int = 10,
        include_metadata: bool = True,
        include_values: bool = False,
    ) -> List[QueryMatch]:
        """
        Return up to top_k nearest matches for the given vector.
        """
        index = self._require_index()
        try:
            res = index.query(
                vector=vector,
                top_k=top_k,
                include_metadata=include_metadata,
                include_values=include_values,
                **self._request_kwargs(),
            )
        except Exception as e:
            raise StoreError(f"Query against {self.index_name} failed: {e}") from e

        try:
            return [
                QueryMatch(
                    id=_field(m, "id"),
                    score=_field(m, "score"),
                    values=list(_field(m, "values") or []),
                    metadata=dict(_field(m, "metadata") or {}),
                )
                for m in _field(res, "matches") or []
            ]
        except (ValidationError, TypeError, ValueError) as e:
            raise StoreError(f"Malformed match in {self.index_name} query response: {e}") from e

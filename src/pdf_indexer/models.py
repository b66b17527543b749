from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """
    One file read from the documents directory. Lives for a single run only.
    """

    name: str
    content: bytes = Field(..., repr=False)


class RecordMetadata(BaseModel):
    """
    Metadata stored next to each vector.
    Serialized with the index's camelCase key for the snippet.
    """

    model_config = ConfigDict(populate_by_name=True)

    filename: str
    text_snippet: str = Field(..., max_length=200, alias="textSnippet")


class Record(BaseModel):
    """
    Unit written to the vector index.
    """

    id: str
    values: List[float]
    metadata: RecordMetadata

    def to_index_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "values": self.values,
            "metadata": self.metadata.model_dump(by_alias=True),
        }


class QueryMatch(BaseModel):
    """
    Single nearest-neighbour hit returned by the index.
    """

    id: str
    score: Optional[float] = None
    values: List[float] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class RunSummary(BaseModel):
    listed: int = 0
    upserted: int = 0
    skipped: int = 0
    failed_names: List[str] = Field(default_factory=list)
    upserted_ids: List[str] = Field(default_factory=list)
    skipped_busy: bool = False

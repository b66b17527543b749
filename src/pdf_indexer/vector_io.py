from __future__ import annotations

import secrets
import string
from typing import List

from pdf_indexer.models import Record, RecordMetadata
from pdf_indexer.vector_text import build_snippet

_ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 9


def generate_record_id() -> str:
    """
    Random base-36 token. Not derived from content: ingesting the same
    document twice yields two distinct records.
    """
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))


def build_record(document_name: str, text: str, vector: List[float]) -> Record:
    """
    Convert an embedded document into an index record.
    Metadata must be scalar values only.
    """
    return Record(
        id=generate_record_id(),
        values=list(vector),
        metadata=RecordMetadata(
            filename=document_name,
            text_snippet=build_snippet(text),
        ),
    )

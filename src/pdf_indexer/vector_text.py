from __future__ import annotations

import re
from typing import Optional

SNIPPET_CHARS = 200

_WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: Optional[str]) -> str:
    """
    Collapse every whitespace run to a single space and trim both ends.
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def build_snippet(text: str, limit: int = SNIPPET_CHARS) -> str:
    """
    Leading slice of the source text kept as record metadata.
    """
    return text[:limit]

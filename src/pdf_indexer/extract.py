from __future__ import annotations

import io
import logging

from pypdf import PdfReader

log = logging.getLogger("pdf_indexer.extract")


class PdfTextExtractor:
    """
    Turns raw PDF bytes into plain text.
    """

    def extract(self, content: bytes) -> str:
        """
        Extract text from every page, joined by newlines.

        Returns "" when the bytes are not a readable PDF; the caller treats an
        empty result as an extraction failure.
        """
        if not content:
            return ""

        try:
            reader = PdfReader(io.BytesIO(content))
            parts = []
            for page in reader.pages:
                txt = page.extract_text() or ""
                if txt.strip():
                    parts.append(txt)
        except Exception as e:
            log.error("PDF parsing failed: %s", e)
            return ""

        return "\n".join(parts).strip()

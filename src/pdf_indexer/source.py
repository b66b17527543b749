from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from pdf_indexer.errors import SourceUnavailableError
from pdf_indexer.models import Document

log = logging.getLogger("pdf_indexer.source")


class DocumentSource:
    """
    Reads every regular file in a directory as raw bytes.
    """

    def __init__(self, docs_dir: Path) -> None:
        self.docs_dir = Path(docs_dir)

    def _entries(self) -> List[Path]:
        try:
            return sorted(self.docs_dir.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise SourceUnavailableError(f"Cannot read documents directory {self.docs_dir}: {e}") from e

    def list_documents(self) -> List[Document]:
        """
        Return the current file set, in name order.
        - directories and other non-file entries are skipped
        - a missing or unreadable directory yields an empty list
        - a file that cannot be read is logged and skipped
        """
        try:
            entries = self._entries()
        except SourceUnavailableError as e:
            log.error("%s", e)
            return []

        docs: List[Document] = []
        for path in entries:
            if not path.is_file():
                continue
            try:
                docs.append(Document(name=path.name, content=path.read_bytes()))
            except OSError as e:
                log.error("Failed to read %s: %s", path, e)

        log.debug("Successfully read %d files.", len(docs))
        return docs

from __future__ import annotations

import logging
from typing import List, Optional

from pdf_indexer.llm_client import LLMClient
from pdf_indexer.models import QueryMatch
from pdf_indexer.prompts import DEFAULT_ASK, EXAMPLE_PROMPT

log = logging.getLogger("pdf_indexer.chat")


def create_chat(
    client: LLMClient,
    records: List[QueryMatch],
    ask: str = DEFAULT_ASK,
    prompt: str = EXAMPLE_PROMPT,
) -> Optional[str]:
    """
    Ask the completion model a question using the first cached record as context.
    Errors are logged and mapped to None.
    """
    if not records:
        log.warning("No cached records to use as context")
        return None

    try:
        answer = client.create_completion(prompt, ask, records[0])
    except Exception:
        log.exception("Completion request failed")
        return None

    log.info("Answer: %s", answer)
    return answer

from __future__ import annotations

import logging
from typing import Optional

from openai import OpenAI

from pdf_indexer.errors import ClientNotAuthorizedError, ConfigurationError
from pdf_indexer.models import QueryMatch

log = logging.getLogger("pdf_indexer.llm")


class LLMClient:
    """
    Thin wrapper around OpenAI chat completions, answering a question
    against one stored record.
    """

    def __init__(self, api_key: str, model: str, timeout_s: Optional[float] = None) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout_s = timeout_s
        self._client: Optional[OpenAI] = None

    def authorize(self) -> None:
        if not self._api_key:
            log.error("OpenAI API key not configured")
            raise ConfigurationError("OpenAI API key is not set")
        self._client = OpenAI(api_key=self._api_key, timeout=self._timeout_s)

    def create_completion(self, prompt: str, ask: str, ctx: Optional[QueryMatch]) -> Optional[str]:
        """
        Send prompt, the record's vector as assistant context, then the question.
        Returns None when the model answers with nothing or with an error.
        """
        if not prompt or not isinstance(prompt, str) or ctx is None:
            raise ValueError("Input prompt must be a non-empty string")
        if self._client is None:
            raise ClientNotAuthorizedError("LLM client used before authorize()")

        vector = ",".join(str(v) for v in ctx.values)

        response = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "user", "content": prompt},
                {"role": "assistant", "content": vector},
                {"role": "user", "content": ask},
            ],
            temperature=1,
        )

        content = response.choices[0].message.content
        if not content or "error" in content.lower():
            log.warning("OpenAI agent returned an error: %s", content)
            return None

        return content

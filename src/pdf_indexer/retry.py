from __future__ import annotations

import logging
import time
from typing import Callable, Tuple, Type, TypeVar, Union

from tenacity import RetryCallState, Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed

log = logging.getLogger("pdf_indexer.retry")

T = TypeVar("T")


def retry_call(
    operation: Callable[[], T],
    max_attempts: int,
    delay_ms: int,
    *,
    sleep: Callable[[float], None] = time.sleep,
    label: str = "operation",
    retry_on: Union[Type[BaseException], Tuple[Type[BaseException], ...]] = Exception,
) -> T:
    """
    Call operation until it succeeds, at most max_attempts times, waiting a
    fixed delay_ms between attempts (no backoff, no jitter).

    Only exceptions matching retry_on are retried; anything else propagates
    from the first attempt. Returns the first successful result. Once attempts
    are exhausted the last exception is re-raised.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    def _before(state: RetryCallState) -> None:
        log.info("Attempt %d to run %s...", state.attempt_number, label)

    def _after(state: RetryCallState) -> None:
        exc = state.outcome.exception() if state.outcome else None
        log.error("Error running %s on attempt %d: %s", label, state.attempt_number, exc)

    def _before_sleep(state: RetryCallState) -> None:
        log.warning("Retrying after %d ms...", delay_ms)

    retryer = Retrying(
        retry=retry_if_exception_type(retry_on),
        stop=stop_after_attempt(max_attempts),
        wait=wait_fixed(delay_ms / 1000.0),
        sleep=sleep,
        before=_before,
        after=_after,
        before_sleep=_before_sleep,
        reraise=True,
    )
    result = retryer(operation)
    log.info("%s succeeded on attempt %d", label, retryer.statistics.get("attempt_number", 1))
    return result

"""
Resilience Infrastructure.

Retry policy and retry callback for calls to the order API.

The policy is exponential backoff built on tenacity:

    attempt 1 fails → wait base
    attempt 2 fails → wait base * 2
    ...
    attempt max_retries + 1 fails → the last exception is re-raised

Usage:
    from hs_order.core.resilience import build_retrying

    retrying = build_retrying(
        max_retries=2,
        base_ms=200,
        retry_on=(httpx.TransportError, httpx.HTTPStatusError),
    )
    response = retrying(send_once, form)
"""

import time
from collections.abc import Callable
from typing import Any

from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from hs_order.core.logging import get_logger

logger = get_logger(__name__)


def log_retry(retry_state: Any) -> None:
    """Tenacity before_sleep callback that emits structured retry events.

    Args:
        retry_state: tenacity.RetryCallState instance
    """
    duration_ms = None
    if retry_state.outcome_timestamp and retry_state.start_time:
        duration_ms = round(
            (retry_state.outcome_timestamp - retry_state.start_time) * 1000
        )

    error = None
    if retry_state.outcome and retry_state.outcome.failed:
        error = str(retry_state.outcome.exception())

    wait_ms = None
    if retry_state.next_action is not None:
        wait_ms = round(retry_state.next_action.sleep * 1000)

    fn_name = getattr(retry_state.fn, "__name__", "unknown")

    logger.warning(
        f"Retrying {fn_name} (attempt {retry_state.attempt_number})",
        resilience_event="retry_attempt",
        dependency=fn_name,
        attempt=retry_state.attempt_number,
        duration_ms=duration_ms,
        wait_ms=wait_ms,
        error=error,
    )


def build_retrying(
    max_retries: int,
    base_ms: int,
    retry_on: tuple[type[BaseException], ...],
    sleep: Callable[[float], None] = time.sleep,
) -> Retrying:
    """Create a blocking retry controller with exponential backoff.

    Args:
        max_retries: Retries after the first attempt (total attempts = max_retries + 1)
        base_ms: Wait before the first retry, in milliseconds; doubles per retry
        retry_on: Exception types that trigger a retry; anything else propagates at once
        sleep: Sleep function, replaceable in tests

    Returns:
        Configured tenacity.Retrying instance that re-raises the last exception
    """
    return Retrying(
        stop=stop_after_attempt(max_retries + 1),
        wait=wait_exponential(multiplier=base_ms / 1000, exp_base=2, min=0),
        retry=retry_if_exception_type(retry_on),
        before_sleep=log_retry,
        sleep=sleep,
        reraise=True,
    )

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, TypeVar

from fastapi import HTTPException

_LOG = logging.getLogger("app.resilience")

T = TypeVar("T")


class OperationTimeout(Exception):
    def __init__(self, timeout_seconds: float):
        super().__init__(f"Operation timed out after {timeout_seconds}s")
        self.timeout_seconds = timeout_seconds


def _is_client_error(exc: BaseException) -> bool:
    return isinstance(exc, HTTPException) and exc.status_code < 500


def with_retry(
    operation: Callable[[], T],
    max_retries: int = 3,
    delay_seconds: float = 1.0,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Runs ``operation`` up to ``max_retries`` times, waiting ``delay * attempt`` between tries.

    Client errors (HTTPException below 500) are raised immediately; anything
    else is retried and the last error re-raised once attempts run out.
    """
    attempts = max(int(max_retries), 1)
    attempt = 1
    while True:
        try:
            return operation()
        except Exception as exc:
            if _is_client_error(exc) or attempt >= attempts:
                raise
            _LOG.warning("Retry attempt %s/%s failed: %s", attempt, attempts, exc)
        sleep(delay_seconds * attempt)
        attempt += 1


def with_timeout(operation: Callable[[], T], timeout_seconds: float = 30.0) -> T:
    # The worker thread is not interrupted on timeout; its result is discarded.
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="with-timeout")
    try:
        future = executor.submit(operation)
        try:
            return future.result(timeout=timeout_seconds)
        except FutureTimeoutError:
            raise OperationTimeout(timeout_seconds) from None
    finally:
        executor.shutdown(wait=False)

"""
Bounded retry for backend calls that fail with auth errors.

Supabase answers an expired or rejected token with a PostgREST error
(PGRST301/PGRST302) or an HTTP 401/403. Those are worth a second attempt
once the session has been restored; everything else is raised immediately.

The backoff sleeps on the calling thread. Async services hand repository
calls to run_in_threadpool so it never runs on the event loop.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeVar

from .exceptions import SessionExpiredError

logger = logging.getLogger(__name__)

T = TypeVar("T")

AUTH_ERROR_MARKERS = ("JWT", "invalid_token", "token_expired", "Session not found")
AUTH_ERROR_CODES = ("PGRST301", "PGRST302")
AUTH_ERROR_STATUSES = (401, 403)


def is_auth_error(error: Any) -> bool:
    """Return True when an exception looks like an expired or rejected session."""
    message = str(getattr(error, "message", None) or error)
    if any(marker in message for marker in AUTH_ERROR_MARKERS):
        return True

    if getattr(error, "code", None) in AUTH_ERROR_CODES:
        return True

    status = getattr(error, "status", None) or getattr(error, "status_code", None)
    try:
        return int(status) in AUTH_ERROR_STATUSES
    except (TypeError, ValueError):
        return False


@dataclass
class RetryConfig:
    """
    Retry policy.

    Attributes:
        max_attempts: Total attempts including the first one
        delay: Base delay in seconds, multiplied by the attempt number
        should_retry: Predicate deciding whether an error is retryable
        before_retry: Optional hook run before every retry; returning False
            aborts with SessionExpiredError (e.g. a failed session refresh)
        sleep: Injected for tests
    """

    max_attempts: int = 3
    delay: float = 1.0
    should_retry: Callable[[BaseException], bool] = is_auth_error
    before_retry: Optional[Callable[[], bool]] = None
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)


def with_auth_retry(
    operation: Callable[[], T],
    operation_name: str = "Supabase operation",
    config: Optional[RetryConfig] = None,
) -> T:
    """
    Run an operation, retrying auth failures with linear backoff.

    Args:
        operation: Zero-argument callable performing the backend call
        operation_name: Label used in log messages
        config: Retry policy (defaults to RetryConfig())

    Returns:
        Whatever the operation returns

    Raises:
        SessionExpiredError: If before_retry reports the session is gone
        Exception: The last error once attempts are exhausted, or the first
            non-retryable error
    """
    config = config or RetryConfig()
    attempts = max(1, config.max_attempts)

    for attempt in range(1, attempts + 1):
        if attempt > 1 and config.before_retry is not None:
            if not config.before_retry():
                logger.warning("%s: could not restore session before retry", operation_name)
                raise SessionExpiredError()

        try:
            return operation()
        except Exception as e:
            if attempt < attempts and config.should_retry(e):
                wait = config.delay * attempt
                logger.warning(
                    "%s failed (attempt %d/%d), retrying in %.1fs: %s",
                    operation_name, attempt, attempts, wait, e,
                )
                config.sleep(wait)
                continue
            logger.debug("%s failed (attempt %d/%d): %s", operation_name, attempt, attempts, e)
            raise

    # Unreachable: the loop either returns or raises
    raise RuntimeError(f"{operation_name} failed after {attempts} attempts")

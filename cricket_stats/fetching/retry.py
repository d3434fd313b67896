"""Bounded exponential-backoff retry around a single backend operation."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from cricket_stats.fetching.exceptions import (
    ConfigurationError,
    ExtractionError,
    QuotaExceededError,
)
from cricket_stats.logging.logger import Log

T = TypeVar("T")

QUOTA_STATUS_CODE = 429
_QUOTA_MARKERS = ("429", "resource_exhausted", "quota", "rate limit", "too many requests")


@dataclass(frozen=True)
class ErrorInfo:
    """Transport-independent view of a failure."""

    status_code: int | None
    message: str


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    initial_delay: float = 2.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.initial_delay < 0:
            raise ValueError("initial_delay must not be negative")


@dataclass(slots=True)
class AttemptState:
    """Counters owned by one ``execute`` call."""

    attempt: int
    delay: float

    def advance(self) -> None:
        self.attempt += 1
        self.delay *= 2


def describe_error(exc: BaseException) -> ErrorInfo:
    """Read a numeric status from ``status_code``, ``code`` or ``status``."""
    status_code: int | None = None
    for attr in ("status_code", "code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            status_code = value
            break
    return ErrorInfo(status_code=status_code, message=str(exc))


def is_quota_error(info: ErrorInfo) -> bool:
    if info.status_code == QUOTA_STATUS_CODE:
        return True
    message = info.message.lower()
    return any(marker in message for marker in _QUOTA_MARKERS)


class RetryingExecutor:
    """Runs an operation, backing off only on rate-limit failures.

    Delays start at ``policy.initial_delay`` and double on each retry. Any
    failure not classified as a quota error propagates immediately.
    """

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        *,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._policy = policy or RetryPolicy()
        self._sleep = sleep or time.sleep

    def execute(self, operation: Callable[[], T]) -> T:
        state = AttemptState(attempt=0, delay=self._policy.initial_delay)
        while True:
            try:
                return operation()
            except (ConfigurationError, ExtractionError):
                raise
            except Exception as exc:
                info = describe_error(exc)
                Log.error(
                    f"Attempt {state.attempt + 1} failed: {info.message}",
                    status_code=info.status_code,
                )
                if not is_quota_error(info):
                    raise
                if state.attempt >= self._policy.max_attempts - 1:
                    Log.error(
                        f"Usage limit still reached after {state.attempt + 1} attempts"
                    )
                    raise QuotaExceededError() from exc
                Log.warning(f"Quota hit. Retrying in {state.delay:g}s...")
                self._sleep(state.delay)
                state.advance()

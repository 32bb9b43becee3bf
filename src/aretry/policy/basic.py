r"""Retry policies that do not look at the failure itself."""

from __future__ import annotations

__all__ = [
    "AlwaysRetryPolicy",
    "MaxAttemptsRetryPolicy",
    "NeverRetryPolicy",
    "TimeoutRetryPolicy",
]

import time
from typing import TYPE_CHECKING

from aretry.core.validation import validate_max_attempts, validate_timeout_ms
from aretry.policy.base import BaseRetryPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.context import RetryContext


class AlwaysRetryPolicy(BaseRetryPolicy):
    """Retry policy that always retries.

    Use with care: without a terminating condition elsewhere (a composite
    with a limit, or an operation that eventually succeeds) the executor
    loops forever, and busy-loops when combined with ``NoBackoff``.

    Example:
        ```pycon
        >>> from aretry.context import RetryContext
        >>> from aretry.policy import AlwaysRetryPolicy
        >>> AlwaysRetryPolicy().should_retry(ValueError(), RetryContext())
        True

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def should_retry(self, failure: BaseException, context: RetryContext) -> bool:  # noqa: ARG002
        return True


class NeverRetryPolicy(BaseRetryPolicy):
    """Retry policy that never retries."""

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def should_retry(self, failure: BaseException, context: RetryContext) -> bool:  # noqa: ARG002
        return False


class MaxAttemptsRetryPolicy(BaseRetryPolicy):
    """Retry policy limiting the number of attempts.

    Retries while ``context.attempt_count < max_attempts``, so the operation
    is invoked at most ``max_attempts`` times (at least once).

    Args:
        max_attempts: Maximum number of attempts, the first one included.
            Must be >= 0.

    Example:
        ```pycon
        >>> from aretry.context import RetryContext
        >>> from aretry.policy import MaxAttemptsRetryPolicy
        >>> policy = MaxAttemptsRetryPolicy(2)
        >>> context = RetryContext()
        >>> context.increment_attempt()
        >>> policy.should_retry(ValueError(), context)
        True
        >>> context.increment_attempt()
        >>> policy.should_retry(ValueError(), context)
        False

        ```
    """

    def __init__(self, max_attempts: int) -> None:
        validate_max_attempts(max_attempts)
        self.max_attempts = max_attempts

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_attempts={self.max_attempts})"

    def should_retry(self, failure: BaseException, context: RetryContext) -> bool:  # noqa: ARG002
        return context.attempt_count < self.max_attempts


class TimeoutRetryPolicy(BaseRetryPolicy):
    """Retry policy limiting the time spent on an execution.

    Retries while the time elapsed since the context start is strictly
    lower than ``timeout_ms``. The clock must be the one used to create the
    context (``time.monotonic`` by default).

    Args:
        timeout_ms: The time budget in milliseconds. Must be >= 0.
        clock: The clock returning the current time in seconds.
    """

    def __init__(self, timeout_ms: int, clock: Callable[[], float] = time.monotonic) -> None:
        validate_timeout_ms(timeout_ms)
        self.timeout_ms = timeout_ms
        self._clock = clock

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(timeout_ms={self.timeout_ms})"

    def should_retry(self, failure: BaseException, context: RetryContext) -> bool:  # noqa: ARG002
        return context.elapsed_ms(now=self._clock()) < self.timeout_ms

r"""Mutable per-execution retry context.

A ``RetryContext`` is created once per ``execute`` call, owned by the
executor for that call, and passed by reference to the retry policy and to
the user operation. It is discarded when the call returns.
"""

from __future__ import annotations

__all__ = ["RetryContext"]

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class RetryContext:
    r"""Record of the progress of one retry execution.

    Only the two most recent failures are kept: ``last_failure`` and the one
    recorded immediately before it (``previous_failure``).

    Args:
        start_time: The start time of the execution. Defaults to
            ``clock()`` evaluated at creation.
        clock: The clock used to compute the start time and the elapsed
            time. Defaults to ``time.monotonic``.

    Example:
        ```pycon
        >>> from aretry.context import RetryContext
        >>> context = RetryContext()
        >>> context.attempt_count
        0
        >>> context.increment_attempt()
        >>> context.record_failure(ValueError("boom"))
        >>> context.attempt_count
        1
        >>> context.last_failure
        ValueError('boom')

        ```
    """

    def __init__(
        self,
        start_time: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._start_time = clock() if start_time is None else start_time
        self._attempt_count = 0
        self._last_failure: BaseException | None = None
        self._previous_failure: BaseException | None = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(attempt_count={self._attempt_count}, "
            f"last_failure={self._last_failure!r})"
        )

    @property
    def attempt_count(self) -> int:
        """The number of attempts started so far (1 on the first try)."""
        return self._attempt_count

    @property
    def last_failure(self) -> BaseException | None:
        """The most recent failure, or ``None`` before the first one."""
        return self._last_failure

    @property
    def previous_failure(self) -> BaseException | None:
        """The failure recorded right before ``last_failure``."""
        return self._previous_failure

    @property
    def start_time(self) -> float:
        """The time at which the context was created."""
        return self._start_time

    def increment_attempt(self) -> None:
        """Increase the attempt count by one.

        Called exactly once at the start of every attempt, including the
        first one.
        """
        self._attempt_count += 1

    def record_failure(self, failure: BaseException) -> None:
        """Store ``failure`` as the most recent failure.

        Args:
            failure: The exception raised by the failed attempt.
        """
        self._previous_failure = self._last_failure
        self._last_failure = failure

    def elapsed_ms(self, now: float | None = None) -> int:
        """Return the number of whole milliseconds since the start time.

        Args:
            now: The current time. Defaults to the context clock.

        Returns:
            The elapsed time in milliseconds.
        """
        if now is None:
            now = self._clock()
        return int((now - self._start_time) * 1000)

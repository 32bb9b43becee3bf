r"""Counters describing the activity of a retry executor.

The statistics outlive a single execution: one instance is usually shared
by every ``execute`` call made on an executor, and it may be shared across
executors running in different threads.
"""

from __future__ import annotations

__all__ = ["BaseRetryStatistics", "InMemoryRetryStatistics"]

import threading
from abc import ABC, abstractmethod

from aretry.core.validation import validate_interval


class BaseRetryStatistics(ABC):
    """Abstract base class for retry statistics.

    Counters are monotonically non-decreasing and only mutated by the
    executor. After every completed execution,
    ``total_attempts == successful_attempts + failed_attempts``.
    """

    @abstractmethod
    def increment_total_attempts(self) -> None:
        """Count one more attempt."""

    @abstractmethod
    def increment_successful_attempts(self) -> None:
        """Count one more successful attempt."""

    @abstractmethod
    def increment_failed_attempts(self) -> None:
        """Count one more failed attempt."""

    @abstractmethod
    def increment_sleep_time(self, milliseconds: int) -> None:
        """Add ``milliseconds`` to the total time spent waiting."""

    @property
    @abstractmethod
    def total_attempts(self) -> int:
        """The number of attempts made."""

    @property
    @abstractmethod
    def successful_attempts(self) -> int:
        """The number of attempts that succeeded."""

    @property
    @abstractmethod
    def failed_attempts(self) -> int:
        """The number of attempts that failed."""

    @property
    @abstractmethod
    def total_sleep_time_ms(self) -> int:
        """The total time spent waiting between attempts, in milliseconds."""

    def snapshot(self) -> dict[str, int]:
        """Return the current counter values.

        Returns:
            A dictionary with one entry per counter.
        """
        return {
            "total_attempts": self.total_attempts,
            "successful_attempts": self.successful_attempts,
            "failed_attempts": self.failed_attempts,
            "total_sleep_time_ms": self.total_sleep_time_ms,
        }


class InMemoryRetryStatistics(BaseRetryStatistics):
    r"""Thread-safe statistics kept in process memory.

    The values are lost when the process ends and are never reset
    automatically.

    Example:
        ```pycon
        >>> from aretry.statistics import InMemoryRetryStatistics
        >>> stats = InMemoryRetryStatistics()
        >>> stats.increment_total_attempts()
        >>> stats.increment_failed_attempts()
        >>> stats.increment_sleep_time(100)
        >>> stats.snapshot()
        {'total_attempts': 1, 'successful_attempts': 0, 'failed_attempts': 1, 'total_sleep_time_ms': 100}

        ```
    """

    def __init__(self) -> None:
        self._total_attempts = 0
        self._successful_attempts = 0
        self._failed_attempts = 0
        self._total_sleep_time_ms = 0
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        values = ", ".join(f"{key}={value}" for key, value in self.snapshot().items())
        return f"{self.__class__.__qualname__}({values})"

    def increment_total_attempts(self) -> None:
        with self._lock:
            self._total_attempts += 1

    def increment_successful_attempts(self) -> None:
        with self._lock:
            self._successful_attempts += 1

    def increment_failed_attempts(self) -> None:
        with self._lock:
            self._failed_attempts += 1

    def increment_sleep_time(self, milliseconds: int) -> None:
        validate_interval("milliseconds", milliseconds)
        with self._lock:
            self._total_sleep_time_ms += milliseconds

    @property
    def total_attempts(self) -> int:
        with self._lock:
            return self._total_attempts

    @property
    def successful_attempts(self) -> int:
        with self._lock:
            return self._successful_attempts

    @property
    def failed_attempts(self) -> int:
        with self._lock:
            return self._failed_attempts

    @property
    def total_sleep_time_ms(self) -> int:
        with self._lock:
            return self._total_sleep_time_ms

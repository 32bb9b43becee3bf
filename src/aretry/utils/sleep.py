r"""Blocking sleep primitives used between retry attempts.

The executor never calls ``time.sleep`` directly; it goes through a
``BaseSleeper`` so that tests can replace the wait with a stub.
"""

from __future__ import annotations

__all__ = ["BaseSleeper", "NanoSleeper", "sleep_milliseconds", "split_milliseconds"]

import time
from abc import ABC, abstractmethod

from aretry.core.validation import validate_interval


def split_milliseconds(milliseconds: int) -> tuple[int, int]:
    """Split a duration into whole seconds and a nanosecond remainder.

    Args:
        milliseconds: The duration in milliseconds. Must be >= 0.

    Returns:
        A ``(seconds, nanoseconds)`` tuple.

    Raises:
        ValueError: If ``milliseconds`` is negative.

    Example:
        ```pycon
        >>> from aretry.utils.sleep import split_milliseconds
        >>> split_milliseconds(2500)
        (2, 500000000)
        >>> split_milliseconds(999)
        (0, 999000000)

        ```
    """
    validate_interval("milliseconds", milliseconds)
    seconds, remainder = divmod(milliseconds, 1000)
    return seconds, remainder * 1_000_000


def sleep_milliseconds(milliseconds: int) -> None:
    """Block the calling thread for ``milliseconds`` milliseconds.

    Args:
        milliseconds: The duration in milliseconds. Must be >= 0.

    Raises:
        ValueError: If ``milliseconds`` is negative.
    """
    seconds, nanoseconds = split_milliseconds(milliseconds)
    if seconds == 0 and nanoseconds == 0:
        return
    time.sleep(seconds + nanoseconds / 1_000_000_000)


class BaseSleeper(ABC):
    """Abstract base class for blocking sleep primitives."""

    @abstractmethod
    def milliseconds(self, milliseconds: int) -> None:
        """Suspend the calling thread.

        Args:
            milliseconds: The duration in milliseconds. Must be >= 0.
        """


class NanoSleeper(BaseSleeper):
    """Sleeper backed by ``time.sleep`` with nanosecond decomposition.

    Example:
        ```pycon
        >>> from aretry.utils.sleep import NanoSleeper
        >>> NanoSleeper().milliseconds(0)

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def milliseconds(self, milliseconds: int) -> None:
        sleep_milliseconds(milliseconds)

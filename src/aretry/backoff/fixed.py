r"""Constant backoff policies: no wait and fixed wait."""

from __future__ import annotations

__all__ = ["FixedBackoff", "NoBackoff"]

from aretry.backoff.base import BaseBackoffPolicy
from aretry.core.config import DEFAULT_INTERVAL_MS
from aretry.core.validation import validate_interval


class NoBackoff(BaseBackoffPolicy):
    """Backoff policy that never waits.

    Combined with a retry policy that always retries, this produces a busy
    loop.

    Example:
        ```pycon
        >>> from aretry.backoff import NoBackoff
        >>> NoBackoff().backoff(1)
        0

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def backoff(self, attempt: int) -> int:  # noqa: ARG002
        return 0


class FixedBackoff(BaseBackoffPolicy):
    """Fixed backoff policy.

    Returns the same wait for every attempt, regardless of the attempt
    number.

    Args:
        interval: The wait in milliseconds (default: 1000).

    Example:
        ```pycon
        >>> from aretry.backoff import FixedBackoff
        >>> backoff = FixedBackoff(interval=250)
        >>> backoff.backoff(1)
        250
        >>> backoff.backoff(10)
        250

        ```
    """

    def __init__(self, interval: int = DEFAULT_INTERVAL_MS) -> None:
        validate_interval("interval", interval)
        self.interval = interval

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(interval={self.interval})"

    def backoff(self, attempt: int) -> int:  # noqa: ARG002
        return self.interval

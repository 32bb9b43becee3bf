r"""Exponential backoff policies, with and without jitter."""

from __future__ import annotations

__all__ = ["ExponentialBackoff", "ExponentialRandomBackoff"]

import math

from aretry.backoff.base import BaseBackoffPolicy
from aretry.core.config import (
    DEFAULT_INTERVAL_MS,
    DEFAULT_MAX_INTERVAL_MS,
    DEFAULT_MULTIPLIER,
)
from aretry.core.validation import validate_attempt, validate_interval, validate_multiplier
from aretry.utils.randomness import BaseRandom, RandomGenerator


def _exponential_interval(initial_interval: int, multiplier: float, attempt: int) -> int:
    validate_attempt(attempt)
    return math.floor(initial_interval * multiplier ** (attempt - 1))


class ExponentialBackoff(BaseBackoffPolicy):
    """Exponential backoff policy.

    Calculates the wait as ``floor(initial_interval * multiplier ** (attempt - 1))``.
    There is no upper bound; use ``ExponentialRandomBackoff`` for a capped
    variant.

    Args:
        initial_interval: The wait after the first failure, in milliseconds
            (default: 1000).
        multiplier: The growth factor between consecutive waits (default: 2.0).

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(initial_interval=1000, multiplier=2)
        >>> backoff.backoff(1)
        1000
        >>> backoff.backoff(2)
        2000
        >>> backoff.backoff(4)
        8000

        ```
    """

    def __init__(
        self,
        initial_interval: int = DEFAULT_INTERVAL_MS,
        multiplier: float = DEFAULT_MULTIPLIER,
    ) -> None:
        validate_interval("initial_interval", initial_interval)
        validate_multiplier(multiplier)

        self.initial_interval = initial_interval
        self.multiplier = multiplier

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_interval={self.initial_interval}, "
            f"multiplier={self.multiplier})"
        )

    def backoff(self, attempt: int) -> int:
        return _exponential_interval(self.initial_interval, self.multiplier, attempt)


class ExponentialRandomBackoff(BaseBackoffPolicy):
    """Exponential backoff policy with a cap and random jitter.

    The exponential interval is first capped at ``max_interval``, then the
    actual wait is drawn uniformly from ``[capped, 2 * capped]``. Attempts
    large enough to overflow the exponential computation use the cap. The
    jitter spreads the retries of many callers that failed at the same time.

    Args:
        initial_interval: The base interval after the first failure, in
            milliseconds (default: 1000).
        multiplier: The growth factor between consecutive intervals
            (default: 2.0).
        max_interval: The cap applied before the jitter, in milliseconds
            (default: 30000).
        random: The random source. Defaults to ``RandomGenerator()``.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialRandomBackoff
        >>> backoff = ExponentialRandomBackoff(1000, 2, 30000)
        >>> 30000 <= backoff.backoff(6) <= 60000
        True

        ```
    """

    def __init__(
        self,
        initial_interval: int = DEFAULT_INTERVAL_MS,
        multiplier: float = DEFAULT_MULTIPLIER,
        max_interval: int = DEFAULT_MAX_INTERVAL_MS,
        random: BaseRandom | None = None,
    ) -> None:
        validate_interval("initial_interval", initial_interval)
        validate_interval("max_interval", max_interval)
        validate_multiplier(multiplier)

        self.initial_interval = initial_interval
        self.multiplier = multiplier
        self.max_interval = max_interval
        self.random = random if random is not None else RandomGenerator()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_interval={self.initial_interval}, "
            f"multiplier={self.multiplier}, max_interval={self.max_interval})"
        )

    def backoff(self, attempt: int) -> int:
        try:
            interval = _exponential_interval(self.initial_interval, self.multiplier, attempt)
        except OverflowError:
            # float power out of range, far past the cap
            interval = self.max_interval
        capped = min(interval, self.max_interval)
        return self.random.next_int(capped, 2 * capped)

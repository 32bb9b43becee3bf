r"""Uniform random backoff policy."""

from __future__ import annotations

__all__ = ["UniformRandomBackoff"]

from aretry.backoff.base import BaseBackoffPolicy
from aretry.core.config import DEFAULT_MIN_INTERVAL_MS, DEFAULT_UNIFORM_MAX_INTERVAL_MS
from aretry.core.validation import validate_interval, validate_range
from aretry.utils.randomness import BaseRandom, RandomGenerator


class UniformRandomBackoff(BaseBackoffPolicy):
    """Backoff policy drawing each wait uniformly from a fixed range.

    Args:
        min_interval: The lower bound in milliseconds, inclusive
            (default: 1000).
        max_interval: The upper bound in milliseconds, inclusive
            (default: 2000).
        random: The random source. Defaults to ``RandomGenerator()``.

    Raises:
        ValueError: If an interval is negative or
            ``min_interval > max_interval``.

    Example:
        ```pycon
        >>> from aretry.backoff import UniformRandomBackoff
        >>> backoff = UniformRandomBackoff(min_interval=100, max_interval=200)
        >>> 100 <= backoff.backoff(1) <= 200
        True

        ```
    """

    def __init__(
        self,
        min_interval: int = DEFAULT_MIN_INTERVAL_MS,
        max_interval: int = DEFAULT_UNIFORM_MAX_INTERVAL_MS,
        random: BaseRandom | None = None,
    ) -> None:
        validate_interval("min_interval", min_interval)
        validate_interval("max_interval", max_interval)
        validate_range(min_interval, max_interval)

        self.min_interval = min_interval
        self.max_interval = max_interval
        self.random = random if random is not None else RandomGenerator()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(min_interval={self.min_interval}, "
            f"max_interval={self.max_interval})"
        )

    def backoff(self, attempt: int) -> int:  # noqa: ARG002
        return self.random.next_int(self.min_interval, self.max_interval)

r"""Injectable random sources for randomized backoff policies."""

from __future__ import annotations

__all__ = ["BaseRandom", "RandomGenerator"]

import random
from abc import ABC, abstractmethod

from aretry.core.validation import validate_range


class BaseRandom(ABC):
    """Abstract base class for random integer sources.

    Randomized backoff policies draw their values from a ``BaseRandom`` so
    that tests can substitute a deterministic implementation.
    """

    @abstractmethod
    def next_int(self, min_value: int, max_value: int) -> int:
        """Return an integer drawn uniformly from ``[min_value, max_value]``.

        Args:
            min_value: The lower bound (inclusive).
            max_value: The upper bound (inclusive).

        Returns:
            The drawn integer.

        Raises:
            ValueError: If ``min_value`` is greater than ``max_value``.
        """


class RandomGenerator(BaseRandom):
    """Random source backed by a private ``random.Random`` instance.

    Args:
        seed: Optional seed for reproducible sequences.

    Example:
        ```pycon
        >>> from aretry.utils.randomness import RandomGenerator
        >>> value = RandomGenerator(seed=42).next_int(1, 6)
        >>> 1 <= value <= 6
        True
        >>> RandomGenerator().next_int(5, 5)
        5

        ```
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)  # noqa: S311

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def next_int(self, min_value: int, max_value: int) -> int:
        validate_range(min_value, max_value)
        return self._random.randint(min_value, max_value)

r"""Abstract base class for backoff policies."""

from __future__ import annotations

__all__ = ["BaseBackoffPolicy"]

from abc import ABC, abstractmethod


class BaseBackoffPolicy(ABC):
    """Abstract base class for backoff policies.

    A backoff policy determines how long to wait before the next attempt,
    based only on the number of attempts made so far. Policies carry their
    own configuration and no per-execution state.
    """

    @abstractmethod
    def backoff(self, attempt: int) -> int:
        """Compute the wait before the next attempt.

        Args:
            attempt: The attempt number (1-indexed). ``attempt=1`` is the
                wait requested after the first failure.

        Returns:
            The wait duration in milliseconds (>= 0).
        """

r"""Abstract base class for retry policies."""

from __future__ import annotations

__all__ = ["BaseRetryPolicy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.context import RetryContext


class BaseRetryPolicy(ABC):
    """Abstract base class for retry policies.

    A retry policy decides, after a failed attempt, whether the operation
    should be attempted again. Policies only hold their own configuration;
    everything specific to one execution is read from the ``RetryContext``.
    """

    @abstractmethod
    def should_retry(self, failure: BaseException, context: RetryContext) -> bool:
        """Decide whether to retry after ``failure``.

        Args:
            failure: The exception raised by the last attempt.
            context: The context of the current execution.

        Returns:
            ``True`` to attempt the operation again, otherwise ``False``.
        """

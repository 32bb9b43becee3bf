r"""Composite retry policy combining several policies."""

from __future__ import annotations

__all__ = ["CompositeRetryPolicy"]

import logging
from typing import TYPE_CHECKING

from aretry.policy.base import BaseRetryPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretry.context import RetryContext

logger: logging.Logger = logging.getLogger(__name__)


class CompositeRetryPolicy(BaseRetryPolicy):
    r"""Retry policy delegating to an ordered list of policies.

    The sub-policies are consulted in order and the evaluation stops as
    soon as the outcome is known:

    - optimistic (default): retries as soon as one policy allows it, and
      stops only if every policy refuses. An empty list never retries.
    - pessimistic: stops as soon as one policy refuses, and retries only if
      every policy allows it. An empty list always retries.

    Composites can be nested.

    Args:
        policies: The sub-policies, in evaluation order.
        optimistic: The combination mode.

    Example:
        ```pycon
        >>> from aretry.context import RetryContext
        >>> from aretry.policy import AlwaysRetryPolicy, CompositeRetryPolicy, NeverRetryPolicy
        >>> policies = [AlwaysRetryPolicy(), NeverRetryPolicy()]
        >>> CompositeRetryPolicy(policies).should_retry(ValueError(), RetryContext())
        True
        >>> CompositeRetryPolicy(policies, optimistic=False).should_retry(
        ...     ValueError(), RetryContext()
        ... )
        False

        ```
    """

    def __init__(self, policies: Iterable[BaseRetryPolicy], optimistic: bool = True) -> None:
        self.policies = list(policies)
        self.optimistic = bool(optimistic)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(policies={self.policies!r}, "
            f"optimistic={self.optimistic})"
        )

    def should_retry(self, failure: BaseException, context: RetryContext) -> bool:
        for policy in self.policies:
            decision = bool(policy.should_retry(failure, context))
            if decision is self.optimistic:
                logger.debug(f"{policy!r} decided should_retry={decision}")
                return decision
        return not self.optimistic

r"""Fluent builder for ``RetryExecutor`` instances."""

from __future__ import annotations

__all__ = ["RetryExecutorBuilder"]

import time
from typing import TYPE_CHECKING

from aretry.backoff import (
    ExponentialBackoff,
    ExponentialRandomBackoff,
    FixedBackoff,
    NoBackoff,
    UniformRandomBackoff,
)
from aretry.core.config import (
    DEFAULT_INTERVAL_MS,
    DEFAULT_MAX_INTERVAL_MS,
    DEFAULT_MIN_INTERVAL_MS,
    DEFAULT_MULTIPLIER,
    DEFAULT_UNIFORM_MAX_INTERVAL_MS,
)
from aretry.executor import RetryExecutor
from aretry.policy import (
    CompositeRetryPolicy,
    MaxAttemptsRetryPolicy,
    SpecificExceptionRetryPolicy,
    TimeoutRetryPolicy,
)

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aretry.backoff import BaseBackoffPolicy
    from aretry.policy import BaseRetryPolicy
    from aretry.statistics import BaseRetryStatistics
    from aretry.utils.randomness import BaseRandom
    from aretry.utils.sleep import BaseSleeper


class RetryExecutorBuilder:
    r"""Build a ``RetryExecutor`` step by step.

    Every ``with_*`` retry method adds one policy. When several policies are
    added they are combined in a ``CompositeRetryPolicy``, pessimistic by
    default so that every limit applies. The backoff methods replace the
    previously selected backoff policy. Anything left unset falls back to
    the executor defaults.

    Example:
        ```pycon
        >>> from aretry import RetryExecutorBuilder
        >>> executor = (
        ...     RetryExecutorBuilder()
        ...     .with_max_attempts(5)
        ...     .retry_on(ConnectionError, TimeoutError)
        ...     .with_exponential_backoff(initial_interval=100, multiplier=2)
        ...     .build()
        ... )
        >>> executor.backoff_policy
        ExponentialBackoff(initial_interval=100, multiplier=2)

        ```
    """

    def __init__(self) -> None:
        self._retry_policies: list[Callable[[], BaseRetryPolicy]] = []
        self._optimistic = False
        self._backoff_policy: BaseBackoffPolicy | None = None
        self._statistics: BaseRetryStatistics | None = None
        self._logger: logging.Logger | None = None
        self._sleeper: BaseSleeper | None = None
        self._clock: Callable[[], float] | None = None

    def with_retry_policy(self, retry_policy: BaseRetryPolicy) -> RetryExecutorBuilder:
        """Add a retry policy."""
        self._retry_policies.append(lambda: retry_policy)
        return self

    def with_max_attempts(self, max_attempts: int) -> RetryExecutorBuilder:
        """Stop once ``max_attempts`` attempts have been made."""
        return self.with_retry_policy(MaxAttemptsRetryPolicy(max_attempts))

    def with_timeout(self, timeout_ms: int) -> RetryExecutorBuilder:
        """Stop once ``timeout_ms`` milliseconds have elapsed.

        The policy reads the clock set with ``with_clock``, whatever the
        order of the calls.
        """
        self._retry_policies.append(
            lambda: TimeoutRetryPolicy(timeout_ms, clock=self._get_clock())
        )
        return self

    def retry_on(self, *exception_types: type[BaseException]) -> RetryExecutorBuilder:
        """Only retry failures that are instances of ``exception_types``.

        Raises:
            ValueError: If no exception type is given.
        """
        if not exception_types:
            msg = "retry_on requires at least one exception type"
            raise ValueError(msg)
        return self.with_retry_policy(SpecificExceptionRetryPolicy(exception_types))

    def optimistic(self) -> RetryExecutorBuilder:
        """Retry as soon as one of the added policies allows it."""
        self._optimistic = True
        return self

    def pessimistic(self) -> RetryExecutorBuilder:
        """Retry only if every added policy allows it (default)."""
        self._optimistic = False
        return self

    def with_backoff_policy(self, backoff_policy: BaseBackoffPolicy) -> RetryExecutorBuilder:
        """Set the backoff policy."""
        self._backoff_policy = backoff_policy
        return self

    def with_no_backoff(self) -> RetryExecutorBuilder:
        """Retry immediately."""
        return self.with_backoff_policy(NoBackoff())

    def with_fixed_backoff(self, interval: int = DEFAULT_INTERVAL_MS) -> RetryExecutorBuilder:
        """Wait ``interval`` milliseconds between attempts."""
        return self.with_backoff_policy(FixedBackoff(interval))

    def with_uniform_random_backoff(
        self,
        min_interval: int = DEFAULT_MIN_INTERVAL_MS,
        max_interval: int = DEFAULT_UNIFORM_MAX_INTERVAL_MS,
        random: BaseRandom | None = None,
    ) -> RetryExecutorBuilder:
        """Wait a random duration in ``[min_interval, max_interval]``."""
        return self.with_backoff_policy(UniformRandomBackoff(min_interval, max_interval, random))

    def with_exponential_backoff(
        self,
        initial_interval: int = DEFAULT_INTERVAL_MS,
        multiplier: float = DEFAULT_MULTIPLIER,
    ) -> RetryExecutorBuilder:
        """Wait ``initial_interval * multiplier ** (attempt - 1)``."""
        return self.with_backoff_policy(ExponentialBackoff(initial_interval, multiplier))

    def with_exponential_random_backoff(
        self,
        initial_interval: int = DEFAULT_INTERVAL_MS,
        multiplier: float = DEFAULT_MULTIPLIER,
        max_interval: int = DEFAULT_MAX_INTERVAL_MS,
        random: BaseRandom | None = None,
    ) -> RetryExecutorBuilder:
        """Wait a capped exponential interval with random jitter."""
        return self.with_backoff_policy(
            ExponentialRandomBackoff(initial_interval, multiplier, max_interval, random)
        )

    def with_statistics(self, statistics: BaseRetryStatistics) -> RetryExecutorBuilder:
        """Use ``statistics``, e.g. to share counters between executors."""
        self._statistics = statistics
        return self

    def with_logger(self, logger: logging.Logger) -> RetryExecutorBuilder:
        """Send the lifecycle events to ``logger``."""
        self._logger = logger
        return self

    def with_sleeper(self, sleeper: BaseSleeper) -> RetryExecutorBuilder:
        """Use ``sleeper`` to wait between attempts."""
        self._sleeper = sleeper
        return self

    def with_clock(self, clock: Callable[[], float]) -> RetryExecutorBuilder:
        """Use ``clock`` for the context start time and the timeout."""
        self._clock = clock
        return self

    def build(self) -> RetryExecutor:
        """Build the executor from the current configuration.

        Returns:
            A new ``RetryExecutor``. The builder can be reused afterwards.
        """
        return RetryExecutor(
            retry_policy=self._build_retry_policy(),
            backoff_policy=self._backoff_policy,
            statistics=self._statistics,
            logger=self._logger,
            sleeper=self._sleeper,
            clock=self._clock,
        )

    def _get_clock(self) -> Callable[[], float]:
        return self._clock if self._clock is not None else time.monotonic

    def _build_retry_policy(self) -> BaseRetryPolicy | None:
        if not self._retry_policies:
            return None
        policies = [factory() for factory in self._retry_policies]
        if len(policies) == 1:
            return policies[0]
        return CompositeRetryPolicy(policies, optimistic=self._optimistic)

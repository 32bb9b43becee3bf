r"""Configuration dataclass and defaults for retry executors.

This module provides the default values used by the policies and the
executor, and a dataclass-based configuration object that can be turned
into a ready-to-use ``RetryExecutor``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INTERVAL_MS",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_INTERVAL_MS",
    "DEFAULT_MIN_INTERVAL_MS",
    "DEFAULT_MULTIPLIER",
    "DEFAULT_UNIFORM_MAX_INTERVAL_MS",
    "RETRY_STATUS_CODES",
    "RetryConfig",
]

import time
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_max_attempts, validate_timeout_ms

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.base import BaseBackoffPolicy
    from aretry.executor import RetryExecutor
    from aretry.policy.base import BaseRetryPolicy


# Default maximum number of attempts, the first one included
DEFAULT_MAX_ATTEMPTS = 3

# Default wait between attempts in milliseconds
# Also the first wait of the exponential policies
DEFAULT_INTERVAL_MS = 1000

# Default growth factor of the exponential policies
# With 1000ms: 1st wait 1000ms, 2nd 2000ms, 3rd 4000ms
DEFAULT_MULTIPLIER = 2.0

# Default cap of the exponential random policy, applied before the jitter
DEFAULT_MAX_INTERVAL_MS = 30000

# Default range of the uniform random policy
DEFAULT_MIN_INTERVAL_MS = 1000
DEFAULT_UNIFORM_MAX_INTERVAL_MS = 2000

# HTTP status codes retried by HttpStatusRetryPolicy
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class RetryConfig:
    """Declarative configuration of a retry executor.

    The configuration is consumed when the executor is built and never
    re-read during an execution.

    Args:
        max_attempts: Maximum number of attempts, the first one included.
            Must be >= 0.
        retry_on: Exception types that may be retried. An empty tuple
            retries every exception.
        timeout_ms: Optional time budget in milliseconds, measured from the
            start of the execution. Must be >= 0 if provided.
        backoff_policy: Optional backoff policy. Defaults to
            ``FixedBackoff()``.
        optimistic: How the attempt limit and the time budget are combined
            when both apply. ``False`` (default) stops as soon as either
            limit is reached; ``True`` keeps retrying while either allows it.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryConfig
        >>> config = RetryConfig(max_attempts=5, retry_on=(ConnectionError,))
        >>> config.max_attempts
        5
        >>> config.merge(max_attempts=10).max_attempts
        10
        >>> config.max_attempts  # Original unchanged
        5

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_on: tuple[type[BaseException], ...] = ()
    timeout_ms: int | None = None
    backoff_policy: BaseBackoffPolicy | None = None
    optimistic: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_max_attempts(self.max_attempts)
        if self.timeout_ms is not None:
            validate_timeout_ms(self.timeout_ms)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with the given parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ``RetryConfig`` instance.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary.

        Returns:
            Dictionary with the configuration parameters.
        """
        return {
            "max_attempts": self.max_attempts,
            "retry_on": self.retry_on,
            "timeout_ms": self.timeout_ms,
            "backoff_policy": self.backoff_policy,
            "optimistic": self.optimistic,
        }

    def build_retry_policy(self, clock: Callable[[], float] | None = None) -> BaseRetryPolicy:
        """Build the retry policy described by this configuration.

        Args:
            clock: The clock read by the timeout policy. Defaults to
                ``time.monotonic``.

        Returns:
            A ``SimpleRetryPolicy``, wrapped with a ``TimeoutRetryPolicy`` in
            a ``CompositeRetryPolicy`` when ``timeout_ms`` is set.

        Example:
            ```pycon
            >>> from aretry.core.config import RetryConfig
            >>> RetryConfig(max_attempts=2).build_retry_policy()
            SimpleRetryPolicy(max_attempts=2, retryable_exceptions=())

            ```
        """
        from aretry.policy import CompositeRetryPolicy, SimpleRetryPolicy, TimeoutRetryPolicy

        policy: BaseRetryPolicy = SimpleRetryPolicy(
            max_attempts=self.max_attempts, retryable_exceptions=self.retry_on
        )
        if self.timeout_ms is None:
            return policy
        timeout = TimeoutRetryPolicy(self.timeout_ms, clock=clock or time.monotonic)
        return CompositeRetryPolicy([policy, timeout], optimistic=self.optimistic)

    def build_backoff_policy(self) -> BaseBackoffPolicy:
        """Return the configured backoff policy or the default one."""
        from aretry.backoff import FixedBackoff

        return self.backoff_policy if self.backoff_policy is not None else FixedBackoff()

    def build_executor(self, **kwargs: Any) -> RetryExecutor:
        """Build a ``RetryExecutor`` from this configuration.

        Args:
            **kwargs: Extra keyword arguments forwarded to ``RetryExecutor``
                (``statistics``, ``logger``, ``sleeper``, ``clock``).

        Returns:
            The configured executor.
        """
        from aretry.executor import RetryExecutor

        return RetryExecutor(
            retry_policy=self.build_retry_policy(clock=kwargs.get("clock")),
            backoff_policy=self.build_backoff_policy(),
            **kwargs,
        )

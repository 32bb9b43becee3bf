r"""aretry - Policy-driven retry orchestration.

This package runs operations that may fail under the control of a retry
policy, which decides whether a failed attempt is retried, and a backoff
policy, which decides how long to wait before the next attempt. Executions
are tracked with per-call contexts and executor-wide statistics, and every
step is reported as a structured logging event.

Key Features:
    - Retry policies: always, never, max attempts, timeout, exception type
      filters, non-repeating exceptions, and optimistic/pessimistic composites
    - HTTP-aware retry policy for httpx errors (429, 500, 502, 503, 504)
    - Backoff policies: none, fixed, uniform random, exponential, and
      exponential with cap and jitter
    - Recovery operations invoked once retries are exhausted
    - Thread-safe attempt and sleep statistics
    - Injectable sleeper, random source and clock for deterministic tests
    - Fluent builder, declarative config and ``@retry`` decorator

Example:
    ```pycon
    >>> from aretry import RetryExecutorBuilder
    >>> executor = (
    ...     RetryExecutorBuilder().with_max_attempts(3).with_no_backoff().build()
    ... )
    >>> executor.execute(lambda context: context.attempt_count)
    1
    >>> executor.execute_with_recovery(
    ...     lambda context: 1 / 0, lambda context: "recovered"
    ... )
    'recovered'

    ```
"""

from __future__ import annotations

__all__ = [
    "RetryConfig",
    "RetryContext",
    "RetryExecutor",
    "RetryExecutorBuilder",
    "__version__",
    "retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.builder import RetryExecutorBuilder
from aretry.context import RetryContext
from aretry.core.config import RetryConfig
from aretry.decorator import retry
from aretry.executor import RetryExecutor

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"

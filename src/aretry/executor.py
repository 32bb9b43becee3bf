r"""Retry executor driving the attempt/decide/wait loop.

The executor invokes an operation until it succeeds or the retry policy
gives up. Between two attempts it asks the backoff policy how long to wait
and blocks for that duration. When the retry policy gives up, the last
failure is re-raised unchanged, or, with ``execute_with_recovery``, a
recovery operation is invoked once and its result returned instead.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.backoff import FixedBackoff
from aretry.context import RetryContext
from aretry.core.config import DEFAULT_MAX_ATTEMPTS
from aretry.policy import MaxAttemptsRetryPolicy
from aretry.statistics import InMemoryRetryStatistics
from aretry.utils.sleep import NanoSleeper
from aretry.utils.structured_logging import log_event

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff import BaseBackoffPolicy
    from aretry.policy import BaseRetryPolicy
    from aretry.statistics import BaseRetryStatistics
    from aretry.utils.sleep import BaseSleeper

T = TypeVar("T")


class RetryExecutor:
    r"""Execute operations under retry and backoff policies.

    One executor can run many executions, sequentially or from several
    threads. Each execution gets its own ``RetryContext``; the statistics
    are shared by all of them.

    Args:
        retry_policy: Decides whether a failed attempt is retried.
            Defaults to ``MaxAttemptsRetryPolicy(3)``.
        backoff_policy: Computes the wait between attempts. Defaults to
            ``FixedBackoff()`` (1000ms).
        statistics: Counters updated by every execution. Defaults to a new
            ``InMemoryRetryStatistics``.
        logger: Logger receiving the lifecycle events. Defaults to the
            ``aretry.executor`` module logger, silent unless configured.
        sleeper: Blocking sleep primitive. Defaults to ``NanoSleeper()``.
        clock: Clock used for the context start time. Defaults to
            ``time.monotonic``.

    Example:
        ```pycon
        >>> from aretry import RetryExecutor
        >>> from aretry.backoff import NoBackoff
        >>> from aretry.policy import MaxAttemptsRetryPolicy
        >>> executor = RetryExecutor(
        ...     retry_policy=MaxAttemptsRetryPolicy(5), backoff_policy=NoBackoff()
        ... )
        >>> def flaky(context):
        ...     if context.attempt_count < 3:
        ...         raise ConnectionError("unreachable")
        ...     return "ok"
        ...
        >>> executor.execute(flaky)
        'ok'
        >>> executor.statistics.failed_attempts
        2
        >>> executor.execute_with_recovery(
        ...     lambda context: 1 / 0, lambda context: f"gave up after {context.attempt_count}"
        ... )
        'gave up after 5'

        ```
    """

    def __init__(
        self,
        retry_policy: BaseRetryPolicy | None = None,
        backoff_policy: BaseBackoffPolicy | None = None,
        statistics: BaseRetryStatistics | None = None,
        logger: logging.Logger | None = None,
        sleeper: BaseSleeper | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.retry_policy: BaseRetryPolicy = (
            retry_policy
            if retry_policy is not None
            else MaxAttemptsRetryPolicy(DEFAULT_MAX_ATTEMPTS)
        )
        self.backoff_policy: BaseBackoffPolicy = (
            backoff_policy if backoff_policy is not None else FixedBackoff()
        )
        self._statistics: BaseRetryStatistics = (
            statistics if statistics is not None else InMemoryRetryStatistics()
        )
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._sleeper: BaseSleeper = sleeper if sleeper is not None else NanoSleeper()
        self._clock = clock if clock is not None else time.monotonic

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(retry_policy={self.retry_policy!r}, "
            f"backoff_policy={self.backoff_policy!r})"
        )

    @property
    def statistics(self) -> BaseRetryStatistics:
        """The statistics updated by this executor."""
        return self._statistics

    def execute(self, operation: Callable[[RetryContext], T]) -> T:
        """Run ``operation`` until it succeeds or the retry policy gives up.

        Args:
            operation: The operation to run. It receives the execution
                context and may be invoked several times.

        Returns:
            The result of the first successful attempt.

        Raises:
            Exception: The failure of the last attempt, unchanged, when the
                retry policy decides not to retry it.
        """
        return self._run(operation, recovery=None)

    def execute_with_recovery(
        self,
        operation: Callable[[RetryContext], T],
        recovery: Callable[[RetryContext], T],
    ) -> T:
        """Run ``operation`` and fall back to ``recovery`` once retries are
        exhausted.

        Args:
            operation: The operation to run. It receives the execution
                context and may be invoked several times.
            recovery: The fallback operation, invoked at most once with the
                execution context when the retry policy gives up.

        Returns:
            The result of the first successful attempt, or the result of
            ``recovery``.

        Raises:
            Exception: Any failure raised by ``recovery``. The recovery is
                never retried.
        """
        return self._run(operation, recovery=recovery)

    def _run(
        self,
        operation: Callable[[RetryContext], T],
        recovery: Callable[[RetryContext], T] | None,
    ) -> T:
        context = RetryContext(clock=self._clock)

        while True:
            context.increment_attempt()
            self._statistics.increment_total_attempts()

            try:
                result = operation(context)
            except Exception as exc:
                self._statistics.increment_failed_attempts()
                log_event(
                    self._logger,
                    logging.WARNING,
                    "operation_failed",
                    attempt=context.attempt_count,
                    exception_type=type(exc).__name__,
                    failed_attempts=self._statistics.failed_attempts,
                    total_attempts=self._statistics.total_attempts,
                )
                context.record_failure(exc)

                if not self.retry_policy.should_retry(exc, context):
                    if recovery is None:
                        raise
                    return self._recover(recovery, context)
            else:
                self._statistics.increment_successful_attempts()
                log_event(
                    self._logger,
                    logging.INFO,
                    "operation_succeeded",
                    attempt=context.attempt_count,
                    successful_attempts=self._statistics.successful_attempts,
                    total_attempts=self._statistics.total_attempts,
                )
                return result

            sleep_time = self.backoff_policy.backoff(context.attempt_count)
            self._statistics.increment_sleep_time(sleep_time)
            log_event(
                self._logger,
                logging.INFO,
                "sleeping_before_retry",
                attempt=context.attempt_count,
                sleep_time_ms=sleep_time,
                total_sleep_time_ms=self._statistics.total_sleep_time_ms,
            )
            self._sleeper.milliseconds(sleep_time)

    def _recover(self, recovery: Callable[[RetryContext], T], context: RetryContext) -> T:
        try:
            result = recovery(context)
        except Exception as exc:
            log_event(
                self._logger,
                logging.ERROR,
                "recovery_failed",
                attempt=context.attempt_count,
                exception_type=type(exc).__name__,
            )
            raise
        log_event(
            self._logger,
            logging.INFO,
            "recovery_succeeded",
            attempt=context.attempt_count,
        )
        return result

r"""Retry policies that filter on the type of the failure."""

from __future__ import annotations

__all__ = [
    "NonRepeatingExceptionRetryPolicy",
    "SimpleRetryPolicy",
    "SpecificExceptionRetryPolicy",
]

from typing import TYPE_CHECKING

from aretry.core.config import DEFAULT_MAX_ATTEMPTS
from aretry.core.validation import validate_max_attempts
from aretry.policy.base import BaseRetryPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretry.context import RetryContext


class SpecificExceptionRetryPolicy(BaseRetryPolicy):
    """Retry policy that retries only one kind of failure.

    Subclasses of ``exception_type`` match as well.

    Args:
        exception_type: The exception type, or a tuple of types, to retry.

    Example:
        ```pycon
        >>> from aretry.context import RetryContext
        >>> from aretry.policy import SpecificExceptionRetryPolicy
        >>> policy = SpecificExceptionRetryPolicy(OSError)
        >>> policy.should_retry(ConnectionError(), RetryContext())
        True
        >>> policy.should_retry(ValueError(), RetryContext())
        False

        ```
    """

    def __init__(
        self, exception_type: type[BaseException] | tuple[type[BaseException], ...]
    ) -> None:
        self.exception_type = exception_type

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(exception_type={self.exception_type!r})"

    def should_retry(self, failure: BaseException, context: RetryContext) -> bool:  # noqa: ARG002
        return isinstance(failure, self.exception_type)


class NonRepeatingExceptionRetryPolicy(BaseRetryPolicy):
    """Retry policy that stops when the same kind of failure happens twice
    in a row.

    Only the failure immediately preceding the current one is consulted,
    and kinds are compared by exact type. The executor records the current
    failure in the context before asking the policy, in which case the
    preceding failure is ``context.previous_failure``.

    Example:
        ```pycon
        >>> from aretry.context import RetryContext
        >>> from aretry.policy import NonRepeatingExceptionRetryPolicy
        >>> policy = NonRepeatingExceptionRetryPolicy()
        >>> context = RetryContext()
        >>> policy.should_retry(ValueError(), context)
        True
        >>> context.record_failure(ValueError())
        >>> policy.should_retry(ValueError(), context)
        False
        >>> context.record_failure(KeyError())
        >>> policy.should_retry(ValueError(), context)
        True

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def should_retry(self, failure: BaseException, context: RetryContext) -> bool:
        preceding = context.last_failure
        if preceding is failure:
            preceding = context.previous_failure
        return preceding is None or type(preceding) is not type(failure)


class SimpleRetryPolicy(BaseRetryPolicy):
    """Retry policy combining an attempt limit with an exception filter.

    Stops once ``context.attempt_count >= max_attempts``. Below the limit,
    retries every failure when ``retryable_exceptions`` is empty, otherwise
    only the failures that are instances of one of its types.

    Args:
        max_attempts: Maximum number of attempts, the first one included
            (default: 3).
        retryable_exceptions: The exception types that may be retried.

    Example:
        ```pycon
        >>> from aretry.context import RetryContext
        >>> from aretry.policy import SimpleRetryPolicy
        >>> policy = SimpleRetryPolicy(max_attempts=3, retryable_exceptions=[TimeoutError])
        >>> context = RetryContext()
        >>> context.increment_attempt()
        >>> policy.should_retry(TimeoutError(), context)
        True
        >>> policy.should_retry(KeyError(), context)
        False

        ```
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retryable_exceptions: Iterable[type[BaseException]] = (),
    ) -> None:
        validate_max_attempts(max_attempts)
        self.max_attempts = max_attempts
        self.retryable_exceptions = tuple(retryable_exceptions)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(max_attempts={self.max_attempts}, "
            f"retryable_exceptions={self.retryable_exceptions!r})"
        )

    def should_retry(self, failure: BaseException, context: RetryContext) -> bool:
        if context.attempt_count >= self.max_attempts:
            return False
        if not self.retryable_exceptions:
            return True
        return isinstance(failure, self.retryable_exceptions)

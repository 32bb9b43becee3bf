r"""Decorator running a function through a retry executor."""

from __future__ import annotations

__all__ = ["retry"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.core.config import RetryConfig
from aretry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.context import RetryContext

T = TypeVar("T")


def retry(
    executor: RetryExecutor | None = None,
    *,
    recovery: Callable[[RetryContext], Any] | None = None,
    **config: Any,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    r"""Make every call of the decorated function go through an executor.

    The decorated function keeps its own signature; it does not receive the
    retry context. The executor used by the wrapper is exposed as its
    ``executor`` attribute, so that its statistics can be inspected.

    Args:
        executor: The executor to use. If omitted, one is built from
            ``RetryConfig(**config)``.
        recovery: Optional fallback invoked with the retry context when the
            retry policy gives up.
        **config: ``RetryConfig`` parameters, only used when ``executor``
            is omitted.

    Returns:
        The decorator.

    Raises:
        TypeError: If ``executor`` is not a ``RetryExecutor``, e.g. when
            the decorator is used without parentheses.
        ValueError: If both ``executor`` and ``config`` are given.

    Example:
        ```pycon
        >>> from aretry import retry
        >>> from aretry.backoff import NoBackoff
        >>> calls = []
        >>> @retry(max_attempts=3, backoff_policy=NoBackoff())
        ... def flaky(value):
        ...     calls.append(value)
        ...     if len(calls) < 2:
        ...         raise ConnectionError("unreachable")
        ...     return value * 2
        ...
        >>> flaky(21)
        42
        >>> flaky.executor.statistics.total_attempts
        2

        ```
    """
    if executor is not None and not isinstance(executor, RetryExecutor):
        msg = (
            f"executor must be a RetryExecutor, got {type(executor).__qualname__}; "
            "use @retry() instead of @retry"
        )
        raise TypeError(msg)
    if executor is not None and config:
        msg = f"executor and config parameters are mutually exclusive, got {sorted(config)}"
        raise ValueError(msg)
    if executor is None:
        executor = RetryConfig(**config).build_executor()

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            def operation(context: RetryContext) -> T:  # noqa: ARG001
                return func(*args, **kwargs)

            if recovery is None:
                return executor.execute(operation)
            return executor.execute_with_recovery(operation, recovery)

        wrapper.executor = executor  # type: ignore[attr-defined]
        return wrapper

    return decorator

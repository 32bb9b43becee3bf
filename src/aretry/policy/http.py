r"""Retry policy for failures raised by httpx.

This policy makes the executor usable around HTTP calls made with httpx:
it retries transient transport errors and responses whose status code
indicates a temporary condition, and gives up on everything else.

Example:
    ```pycon
    >>> import httpx
    >>> from aretry import RetryExecutor
    >>> from aretry.policy import CompositeRetryPolicy, HttpStatusRetryPolicy, MaxAttemptsRetryPolicy
    >>> executor = RetryExecutor(
    ...     retry_policy=CompositeRetryPolicy(
    ...         [MaxAttemptsRetryPolicy(5), HttpStatusRetryPolicy()], optimistic=False
    ...     )
    ... )
    >>> def fetch(context):
    ...     response = httpx.get("https://api.example.com/data")
    ...     return response.raise_for_status()
    ...
    >>> response = executor.execute(fetch)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["HttpStatusRetryPolicy"]

import logging
from typing import TYPE_CHECKING

import httpx

from aretry.core.config import RETRY_STATUS_CODES
from aretry.policy.base import BaseRetryPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretry.context import RetryContext

logger: logging.Logger = logging.getLogger(__name__)


class HttpStatusRetryPolicy(BaseRetryPolicy):
    """Retry policy for ``httpx`` errors.

    Retries ``httpx.HTTPStatusError`` whose response status code is in
    ``status_forcelist`` and, if enabled, ``httpx.TransportError``
    (timeouts, connection and protocol errors). Any other failure is not
    retried. This policy does not limit the number of attempts; combine it
    with a limit in a pessimistic ``CompositeRetryPolicy``.

    Args:
        status_forcelist: HTTP status codes that should be retried
            (default: 429, 500, 502, 503, 504).
        retry_on_transport_errors: Whether transport errors are retried.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.context import RetryContext
        >>> from aretry.policy import HttpStatusRetryPolicy
        >>> request = httpx.Request("GET", "https://example.com")
        >>> error = httpx.HTTPStatusError(
        ...     "Service Unavailable",
        ...     request=request,
        ...     response=httpx.Response(503, request=request),
        ... )
        >>> HttpStatusRetryPolicy().should_retry(error, RetryContext())
        True
        >>> HttpStatusRetryPolicy(status_forcelist=[429]).should_retry(error, RetryContext())
        False

        ```
    """

    def __init__(
        self,
        status_forcelist: Iterable[int] = RETRY_STATUS_CODES,
        retry_on_transport_errors: bool = True,
    ) -> None:
        self.status_forcelist = tuple(status_forcelist)
        self.retry_on_transport_errors = retry_on_transport_errors

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(status_forcelist={self.status_forcelist}, "
            f"retry_on_transport_errors={self.retry_on_transport_errors})"
        )

    def should_retry(self, failure: BaseException, context: RetryContext) -> bool:  # noqa: ARG002
        if isinstance(failure, httpx.HTTPStatusError):
            status_code = failure.response.status_code
            if status_code in self.status_forcelist:
                return True
            logger.debug(
                f"{failure.request.method} request to {failure.request.url} failed with "
                f"non-retryable status {status_code}"
            )
            return False
        if isinstance(failure, httpx.TransportError):
            return self.retry_on_transport_errors
        return False

r"""Parameter validation utilities for retry and backoff policies.

This module provides validation functions for policy parameters to ensure
they meet the required constraints before being used in the retry loop.
Invalid configuration fails fast with a ``ValueError``.
"""

from __future__ import annotations

__all__ = [
    "validate_attempt",
    "validate_interval",
    "validate_max_attempts",
    "validate_multiplier",
    "validate_range",
    "validate_timeout_ms",
]


def validate_max_attempts(max_attempts: int) -> None:
    """Validate the maximum number of attempts.

    Args:
        max_attempts: Maximum number of attempts. Must be >= 0.
            A value of 0 means the first failure is never retried.

    Raises:
        ValueError: If ``max_attempts`` is negative.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts(-1)
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 0, got -1

        ```
    """
    if max_attempts < 0:
        msg = f"max_attempts must be >= 0, got {max_attempts}"
        raise ValueError(msg)


def validate_interval(name: str, interval: int) -> None:
    """Validate a backoff interval in milliseconds.

    Args:
        name: The parameter name, used in the error message.
        interval: The interval in milliseconds. Must be >= 0.

    Raises:
        ValueError: If ``interval`` is negative.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_interval
        >>> validate_interval("interval", 0)
        >>> validate_interval("interval", -5)
        Traceback (most recent call last):
        ...
        ValueError: interval must be >= 0, got -5

        ```
    """
    if interval < 0:
        msg = f"{name} must be >= 0, got {interval}"
        raise ValueError(msg)


def validate_multiplier(multiplier: float) -> None:
    """Validate an exponential backoff multiplier.

    Args:
        multiplier: The growth factor. Must be > 0.

    Raises:
        ValueError: If ``multiplier`` is not positive.
    """
    if multiplier <= 0:
        msg = f"multiplier must be > 0, got {multiplier}"
        raise ValueError(msg)


def validate_range(min_value: int, max_value: int) -> None:
    """Validate that ``min_value <= max_value``.

    Args:
        min_value: The lower bound (inclusive).
        max_value: The upper bound (inclusive).

    Raises:
        ValueError: If ``min_value`` is greater than ``max_value``.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_range
        >>> validate_range(1, 1)
        >>> validate_range(2, 1)
        Traceback (most recent call last):
        ...
        ValueError: min_value (2) must be <= max_value (1)

        ```
    """
    if min_value > max_value:
        msg = f"min_value ({min_value}) must be <= max_value ({max_value})"
        raise ValueError(msg)


def validate_timeout_ms(timeout_ms: int) -> None:
    """Validate a timeout in milliseconds.

    Args:
        timeout_ms: The timeout in milliseconds. Must be >= 0.

    Raises:
        ValueError: If ``timeout_ms`` is negative.
    """
    if timeout_ms < 0:
        msg = f"timeout_ms must be >= 0, got {timeout_ms}"
        raise ValueError(msg)


def validate_attempt(attempt: int) -> None:
    """Validate a 1-indexed attempt number passed to a backoff policy.

    Args:
        attempt: The attempt number. Must be >= 1.

    Raises:
        ValueError: If ``attempt`` is lower than 1.
    """
    if attempt < 1:
        msg = f"attempt must be >= 1, got {attempt}"
        raise ValueError(msg)

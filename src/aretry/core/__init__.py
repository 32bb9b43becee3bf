r"""Configuration defaults and validation shared by policies and
executors."""

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
    "validate_attempt",
    "validate_interval",
    "validate_max_attempts",
    "validate_multiplier",
    "validate_range",
    "validate_timeout_ms",
]

from aretry.core.config import (
    DEFAULT_INTERVAL_MS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_INTERVAL_MS,
    DEFAULT_MIN_INTERVAL_MS,
    DEFAULT_MULTIPLIER,
    DEFAULT_UNIFORM_MAX_INTERVAL_MS,
    RETRY_STATUS_CODES,
    RetryConfig,
)
from aretry.core.validation import (
    validate_attempt,
    validate_interval,
    validate_max_attempts,
    validate_multiplier,
    validate_range,
    validate_timeout_ms,
)

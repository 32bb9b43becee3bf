r"""Collaborators used by the retry executor: sleeping, randomness and
structured logging."""

from __future__ import annotations

__all__ = [
    "BaseRandom",
    "BaseSleeper",
    "NanoSleeper",
    "RandomGenerator",
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_event",
    "log_structured",
    "set_correlation_id",
    "sleep_milliseconds",
]

from aretry.utils.randomness import BaseRandom, RandomGenerator
from aretry.utils.sleep import BaseSleeper, NanoSleeper, sleep_milliseconds
from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_event,
    log_structured,
    set_correlation_id,
)

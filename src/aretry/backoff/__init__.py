r"""Backoff policies computing the wait between two attempts.

All durations are integer milliseconds and attempts are 1-indexed.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffPolicy",
    "ExponentialBackoff",
    "ExponentialRandomBackoff",
    "FixedBackoff",
    "NoBackoff",
    "UniformRandomBackoff",
]

from aretry.backoff.base import BaseBackoffPolicy
from aretry.backoff.exponential import ExponentialBackoff, ExponentialRandomBackoff
from aretry.backoff.fixed import FixedBackoff, NoBackoff
from aretry.backoff.uniform import UniformRandomBackoff

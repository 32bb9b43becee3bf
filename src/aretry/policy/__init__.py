r"""Retry policies deciding whether a failed attempt is retried.

Policies are stateless apart from their configuration and can be
combined with ``CompositeRetryPolicy``.
"""

from __future__ import annotations

__all__ = [
    "AlwaysRetryPolicy",
    "BaseRetryPolicy",
    "CompositeRetryPolicy",
    "HttpStatusRetryPolicy",
    "MaxAttemptsRetryPolicy",
    "NeverRetryPolicy",
    "NonRepeatingExceptionRetryPolicy",
    "SimpleRetryPolicy",
    "SpecificExceptionRetryPolicy",
    "TimeoutRetryPolicy",
]

from aretry.policy.base import BaseRetryPolicy
from aretry.policy.basic import (
    AlwaysRetryPolicy,
    MaxAttemptsRetryPolicy,
    NeverRetryPolicy,
    TimeoutRetryPolicy,
)
from aretry.policy.composite import CompositeRetryPolicy
from aretry.policy.exception import (
    NonRepeatingExceptionRetryPolicy,
    SimpleRetryPolicy,
    SpecificExceptionRetryPolicy,
)
from aretry.policy.http import HttpStatusRetryPolicy

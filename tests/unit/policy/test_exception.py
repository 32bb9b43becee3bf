r"""Unit tests for the retry policies that filter on the failure type."""

from __future__ import annotations

import pytest

from aretry.context import RetryContext
from aretry.policy import (
    NonRepeatingExceptionRetryPolicy,
    SimpleRetryPolicy,
    SpecificExceptionRetryPolicy,
)


def make_context(attempts: int) -> RetryContext:
    context = RetryContext()
    for _ in range(attempts):
        context.increment_attempt()
    return context


class CustomConnectionError(ConnectionError):
    pass


##################################################
#     Tests for SpecificExceptionRetryPolicy     #
##################################################


def test_specific_exception_retry_policy_matches() -> None:
    policy = SpecificExceptionRetryPolicy(ConnectionError)
    assert policy.should_retry(ConnectionError(), make_context(1))


def test_specific_exception_retry_policy_matches_subclass() -> None:
    """Test that subclasses of the configured type are retried."""
    policy = SpecificExceptionRetryPolicy(ConnectionError)
    assert policy.should_retry(CustomConnectionError(), make_context(1))


def test_specific_exception_retry_policy_rejects_other_type() -> None:
    policy = SpecificExceptionRetryPolicy(ConnectionError)
    assert not policy.should_retry(ValueError(), make_context(1))


def test_specific_exception_retry_policy_rejects_parent_type() -> None:
    policy = SpecificExceptionRetryPolicy(CustomConnectionError)
    assert not policy.should_retry(ConnectionError(), make_context(1))


def test_specific_exception_retry_policy_tuple() -> None:
    policy = SpecificExceptionRetryPolicy((KeyError, TimeoutError))
    assert policy.should_retry(KeyError("a"), make_context(1))
    assert policy.should_retry(TimeoutError(), make_context(1))
    assert not policy.should_retry(ValueError(), make_context(1))


def test_specific_exception_retry_policy_ignores_attempts() -> None:
    policy = SpecificExceptionRetryPolicy(ValueError)
    assert policy.should_retry(ValueError(), make_context(1000))


def test_specific_exception_retry_policy_repr() -> None:
    assert repr(SpecificExceptionRetryPolicy(ValueError)) == (
        "SpecificExceptionRetryPolicy(exception_type=<class 'ValueError'>)"
    )


######################################################
#     Tests for NonRepeatingExceptionRetryPolicy     #
######################################################


def test_non_repeating_first_failure() -> None:
    """Test that the first failure of an execution is retried."""
    policy = NonRepeatingExceptionRetryPolicy()
    assert policy.should_retry(ValueError(), make_context(1))


def test_non_repeating_first_failure_already_recorded() -> None:
    """Test that the first failure is retried when it is already recorded
    in the context."""
    policy = NonRepeatingExceptionRetryPolicy()
    context = make_context(1)
    failure = ValueError()
    context.record_failure(failure)
    assert policy.should_retry(failure, context)


def test_non_repeating_same_type_twice() -> None:
    policy = NonRepeatingExceptionRetryPolicy()
    context = make_context(2)
    context.record_failure(ValueError("first"))
    assert not policy.should_retry(ValueError("second"), context)


def test_non_repeating_same_type_twice_already_recorded() -> None:
    """Test that the preceding failure is used when the current one is
    already recorded."""
    policy = NonRepeatingExceptionRetryPolicy()
    context = make_context(2)
    context.record_failure(ValueError("first"))
    failure = ValueError("second")
    context.record_failure(failure)
    assert not policy.should_retry(failure, context)


def test_non_repeating_different_types() -> None:
    policy = NonRepeatingExceptionRetryPolicy()
    context = make_context(2)
    context.record_failure(KeyError("first"))
    failure = ValueError("second")
    context.record_failure(failure)
    assert policy.should_retry(failure, context)


def test_non_repeating_only_consults_preceding_failure() -> None:
    """Test that failures older than the preceding one are ignored."""
    policy = NonRepeatingExceptionRetryPolicy()
    context = make_context(3)
    context.record_failure(ValueError("a"))
    context.record_failure(KeyError("b"))
    assert policy.should_retry(ValueError("c"), context)


def test_non_repeating_compares_exact_type() -> None:
    """Test that a subclass is a different kind of failure."""
    policy = NonRepeatingExceptionRetryPolicy()
    context = make_context(2)
    context.record_failure(ConnectionError())
    assert policy.should_retry(CustomConnectionError(), context)


def test_non_repeating_repr() -> None:
    assert repr(NonRepeatingExceptionRetryPolicy()) == "NonRepeatingExceptionRetryPolicy()"


#######################################
#     Tests for SimpleRetryPolicy     #
#######################################


def test_simple_retry_policy_defaults() -> None:
    policy = SimpleRetryPolicy()
    assert policy.max_attempts == 3
    assert policy.retryable_exceptions == ()


@pytest.mark.parametrize(("attempts", "expected"), [(1, True), (2, True), (3, False)])
def test_simple_retry_policy_empty_filter(attempts: int, expected: bool) -> None:
    """Test that an empty filter retries every failure below the limit."""
    policy = SimpleRetryPolicy(max_attempts=3)
    assert policy.should_retry(RuntimeError(), make_context(attempts)) is expected


def test_simple_retry_policy_filter() -> None:
    policy = SimpleRetryPolicy(max_attempts=3, retryable_exceptions=[TimeoutError, KeyError])
    context = make_context(1)
    assert policy.should_retry(TimeoutError(), context)
    assert policy.should_retry(KeyError("a"), context)
    assert not policy.should_retry(ValueError(), context)


def test_simple_retry_policy_filter_subclass() -> None:
    policy = SimpleRetryPolicy(max_attempts=3, retryable_exceptions=[ConnectionError])
    assert policy.should_retry(CustomConnectionError(), make_context(1))


def test_simple_retry_policy_limit_takes_precedence() -> None:
    """Test that a matching failure is not retried past the limit."""
    policy = SimpleRetryPolicy(max_attempts=2, retryable_exceptions=[TimeoutError])
    assert not policy.should_retry(TimeoutError(), make_context(2))


def test_simple_retry_policy_accepts_generator() -> None:
    policy = SimpleRetryPolicy(retryable_exceptions=(exc for exc in [KeyError]))
    assert policy.retryable_exceptions == (KeyError,)


def test_simple_retry_policy_invalid_max_attempts() -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 0"):
        SimpleRetryPolicy(max_attempts=-2)


def test_simple_retry_policy_repr() -> None:
    assert repr(SimpleRetryPolicy(2, [KeyError])) == (
        "SimpleRetryPolicy(max_attempts=2, retryable_exceptions=(<class 'KeyError'>,))"
    )

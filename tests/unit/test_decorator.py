r"""Unit tests for the retry decorator."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry import RetryExecutor, retry
from aretry.backoff import NoBackoff
from aretry.context import RetryContext
from aretry.policy import MaxAttemptsRetryPolicy
from tests.helpers import RecordingSleeper


@pytest.fixture
def executor(sleeper: RecordingSleeper) -> RetryExecutor:
    return RetryExecutor(
        retry_policy=MaxAttemptsRetryPolicy(3),
        backoff_policy=NoBackoff(),
        sleeper=sleeper,
        logger=Mock(),
    )


###########################
#     Tests for retry     #
###########################


def test_retry_success(executor: RetryExecutor) -> None:
    @retry(executor)
    def add(a: int, b: int = 0) -> int:
        return a + b

    assert add(1, b=2) == 3
    assert executor.statistics.total_attempts == 1


def test_retry_retries_failures(executor: RetryExecutor) -> None:
    calls = []

    @retry(executor)
    def flaky(value: str) -> str:
        calls.append(value)
        if len(calls) < 3:
            msg = "unreachable"
            raise ConnectionError(msg)
        return value.upper()

    assert flaky("ok") == "OK"
    assert calls == ["ok", "ok", "ok"]
    assert executor.statistics.failed_attempts == 2


def test_retry_exhausted_raises(executor: RetryExecutor) -> None:
    @retry(executor)
    def always_fails() -> None:
        msg = "boom"
        raise ValueError(msg)

    with pytest.raises(ValueError, match=r"boom"):
        always_fails()
    assert executor.statistics.total_attempts == 3


def test_retry_with_recovery(executor: RetryExecutor) -> None:
    recovery = Mock(return_value="fallback")

    @retry(executor, recovery=recovery)
    def always_fails() -> str:
        msg = "boom"
        raise ValueError(msg)

    assert always_fails() == "fallback"
    recovery.assert_called_once()
    context = recovery.call_args.args[0]
    assert isinstance(context, RetryContext)
    assert context.attempt_count == 3


def test_retry_preserves_metadata(executor: RetryExecutor) -> None:
    @retry(executor)
    def documented() -> None:
        """Some documentation."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Some documentation."


def test_retry_exposes_executor(executor: RetryExecutor) -> None:
    @retry(executor)
    def noop() -> None:
        pass

    assert noop.executor is executor


def test_retry_from_config() -> None:
    calls = []

    @retry(max_attempts=2, backoff_policy=NoBackoff())
    def flaky() -> int:
        calls.append(1)
        msg = "boom"
        raise KeyError(msg)

    with pytest.raises(KeyError):
        flaky()
    assert len(calls) == 2
    assert flaky.executor.statistics.failed_attempts == 2


def test_retry_from_config_retry_on() -> None:
    calls = []

    @retry(max_attempts=5, retry_on=(KeyError,), backoff_policy=NoBackoff())
    def fails_with_value_error() -> None:
        calls.append(1)
        msg = "not retryable"
        raise ValueError(msg)

    with pytest.raises(ValueError, match=r"not retryable"):
        fails_with_value_error()
    assert len(calls) == 1


def test_retry_default_config_builds_executor() -> None:
    @retry()
    def noop() -> str:
        return "done"

    assert noop() == "done"
    assert isinstance(noop.executor, RetryExecutor)


def test_retry_executor_and_config_are_exclusive(executor: RetryExecutor) -> None:
    with pytest.raises(ValueError, match=r"mutually exclusive"):
        retry(executor, max_attempts=3)


def test_retry_without_parentheses() -> None:
    with pytest.raises(TypeError, match=r"executor must be a RetryExecutor, got function"):

        @retry  # type: ignore[arg-type]
        def noop() -> None:
            pass


def test_retry_invalid_config() -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 0"):
        retry(max_attempts=-1)

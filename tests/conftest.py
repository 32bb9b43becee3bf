from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry.context import RetryContext
from tests.helpers import FakeClock, RecordingSleeper


@pytest.fixture
def clock() -> FakeClock:
    """Create a manually controlled clock."""
    return FakeClock()


@pytest.fixture
def context(clock: FakeClock) -> RetryContext:
    """Create a retry context started at the fake clock time."""
    return RetryContext(clock=clock)


@pytest.fixture
def sleeper() -> RecordingSleeper:
    """Create a sleeper that records durations instead of blocking."""
    return RecordingSleeper()


@pytest.fixture
def mock_logger() -> Mock:
    """Create a mock logger accepting every level."""
    logger = Mock()
    logger.isEnabledFor.return_value = True
    return logger

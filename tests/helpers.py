r"""Deterministic collaborators shared by the unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from aretry.utils.randomness import BaseRandom
from aretry.utils.sleep import BaseSleeper

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretry.context import RetryContext


class FakeClock:
    """Clock returning a manually controlled time, in seconds."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubRandom(BaseRandom):
    """Random source returning the lower or upper bound, and recording the
    requested ranges."""

    def __init__(self, pick_max: bool = False) -> None:
        self.pick_max = pick_max
        self.calls: list[tuple[int, int]] = []

    def next_int(self, min_value: int, max_value: int) -> int:
        self.calls.append((min_value, max_value))
        return max_value if self.pick_max else min_value


class RecordingSleeper(BaseSleeper):
    """Sleeper that records the requested durations instead of
    blocking."""

    def __init__(self) -> None:
        self.durations: list[int] = []

    def milliseconds(self, milliseconds: int) -> None:
        self.durations.append(milliseconds)


class FlakyOperation:
    """Operation raising the given failures in order, then returning
    ``result``."""

    def __init__(self, failures: Iterable[BaseException] = (), result: Any = "success") -> None:
        self.failures = list(failures)
        self.result = result
        self.calls = 0
        self.attempts_seen: list[int] = []

    def __call__(self, context: RetryContext) -> Any:
        self.calls += 1
        self.attempts_seen.append(context.attempt_count)
        if self.failures:
            raise self.failures.pop(0)
        return self.result

r"""Unit tests for the blocking sleep primitives."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from aretry.utils.sleep import BaseSleeper, NanoSleeper, sleep_milliseconds, split_milliseconds

########################################
#     Tests for split_milliseconds     #
########################################


@pytest.mark.parametrize(
    ("milliseconds", "expected"),
    [
        (0, (0, 0)),
        (1, (0, 1_000_000)),
        (999, (0, 999_000_000)),
        (1000, (1, 0)),
        (2500, (2, 500_000_000)),
        (61_001, (61, 1_000_000)),
    ],
)
def test_split_milliseconds(milliseconds: int, expected: tuple[int, int]) -> None:
    assert split_milliseconds(milliseconds) == expected


def test_split_milliseconds_negative() -> None:
    with pytest.raises(ValueError, match=r"milliseconds must be >= 0, got -1"):
        split_milliseconds(-1)


########################################
#     Tests for sleep_milliseconds     #
########################################


def test_sleep_milliseconds() -> None:
    with patch("aretry.utils.sleep.time.sleep") as sleep_mock:
        sleep_milliseconds(2500)
    sleep_mock.assert_called_once_with(2.5)


def test_sleep_milliseconds_sub_second() -> None:
    with patch("aretry.utils.sleep.time.sleep") as sleep_mock:
        sleep_milliseconds(250)
    sleep_mock.assert_called_once_with(0.25)


def test_sleep_milliseconds_zero_returns_immediately() -> None:
    with patch("aretry.utils.sleep.time.sleep") as sleep_mock:
        sleep_milliseconds(0)
    sleep_mock.assert_not_called()


def test_sleep_milliseconds_negative() -> None:
    with patch("aretry.utils.sleep.time.sleep") as sleep_mock:
        with pytest.raises(ValueError, match=r"milliseconds must be >= 0"):
            sleep_milliseconds(-10)
    sleep_mock.assert_not_called()


#################################
#     Tests for NanoSleeper     #
#################################


def test_base_sleeper_is_abstract() -> None:
    with pytest.raises(TypeError, match=r"Can't instantiate abstract class"):
        BaseSleeper()  # type: ignore[abstract]


def test_nano_sleeper_milliseconds() -> None:
    with patch("aretry.utils.sleep.time.sleep") as sleep_mock:
        NanoSleeper().milliseconds(1200)
    sleep_mock.assert_called_once_with(1.2)


def test_nano_sleeper_zero() -> None:
    with patch("aretry.utils.sleep.time.sleep") as sleep_mock:
        NanoSleeper().milliseconds(0)
    sleep_mock.assert_not_called()


def test_nano_sleeper_really_sleeps() -> None:
    NanoSleeper().milliseconds(1)


def test_nano_sleeper_repr() -> None:
    assert repr(NanoSleeper()) == "NanoSleeper()"

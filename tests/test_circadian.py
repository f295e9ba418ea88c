"""Tests for the circadian curve."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from keylights import circadian
from keylights.delta import SignedDelta


@pytest.mark.parametrize(
    ("hour", "minute", "expected"),
    [
        (13, 2, (100, 5400, 75, 4900)),
        (15, 4, (100, 4600, 75, 4100)),
        (18, 35, (75, 2900, 50, 2400)),
    ],
)
def test_reference_times(hour: int, minute: int, expected: tuple[int, ...]) -> None:
    values = circadian.evaluate(datetime(2024, 3, 1, hour, minute))
    assert (
        values.key_brightness,
        values.key_temperature,
        values.fill_brightness,
        values.fill_temperature,
    ) == expected


def test_only_time_of_day_matters() -> None:
    a = circadian.evaluate(datetime(2020, 1, 1, 10, 30, 5))
    b = circadian.evaluate(datetime(2031, 7, 19, 10, 30, 59))
    c = circadian.evaluate(
        datetime(2031, 7, 19, 10, 30, tzinfo=timezone(timedelta(hours=9)))
    )
    assert a == b == c


def test_deterministic() -> None:
    now = datetime(2024, 6, 1, 9, 15)
    assert circadian.evaluate(now) == circadian.evaluate(now)


def test_night_is_dim_and_warm() -> None:
    for hour in (0, 2, 4, 22, 23):
        values = circadian.evaluate_minute(hour * 60)
        assert values.key_brightness == 20
        assert values.key_temperature == 2900


def test_values_stay_in_range() -> None:
    for _, values in circadian.curve(1):
        assert 20 <= values.key_brightness <= 100
        assert 2900 <= values.key_temperature <= 7000
        assert values.fill_brightness == max(0, values.key_brightness - 25)
        assert values.fill_temperature == max(0, values.key_temperature - 500)


def test_curve_steps() -> None:
    points = list(circadian.curve(60))
    assert len(points) == 24
    assert points[0][0] == 0
    assert points[-1][0] == 23 * 60


def test_curve_rejects_bad_step() -> None:
    with pytest.raises(ValueError):
        list(circadian.curve(0))


def test_minute_out_of_range() -> None:
    with pytest.raises(ValueError):
        circadian.evaluate_minute(1440)


def test_polynomial() -> None:
    assert circadian.polynomial((1.0, 2.0, 3.0), 2) == 1.0 + 4.0 + 12.0
    assert circadian.polynomial((), 5) == 0.0


def test_as_deltas() -> None:
    values = circadian.CircadianValues(100, 5400, 75, 4900)
    assert values.as_deltas() == (
        SignedDelta.absolute(100),
        SignedDelta.absolute(5400),
        SignedDelta.absolute(75),
        SignedDelta.absolute(4900),
    )


def test_format_minute() -> None:
    assert circadian.format_minute(0) == "00:00"
    assert circadian.format_minute(1115) == "18:35"

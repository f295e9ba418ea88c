"""Circadian brightness and temperature curve.

The curve is a pair of polynomial regressions over the minutes elapsed since
local midnight. Both were fit offline against hand-picked anchor points
(dim and warm at night, cool around late morning, warming through the
afternoon) and are used here as fixed constants.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta

from keylights import const
from keylights.delta import SignedDelta

_LOGGER = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60

TEMPERATURE_COEFFICIENTS: tuple[float, ...] = (
    2600.0,
    -130.92727170818094,
    0.81153486801312469,
    -0.0018425918195566836,
    2.0161398969836157e-06,
    -1.0801703614506355e-09,
    2.2732253561712724e-13,
)

BRIGHTNESS_COEFFICIENTS: tuple[float, ...] = (
    -169.30015282730471,
    0.66041209342533613,
    -0.00036354760030256366,
    -2.8558637830162736e-08,
)


@dataclass(frozen=True, slots=True)
class CircadianValues:
    """Target values for both lights at one point in the day."""

    key_brightness: int
    key_temperature: int
    fill_brightness: int
    fill_temperature: int

    def as_deltas(self) -> tuple[SignedDelta, SignedDelta, SignedDelta, SignedDelta]:
        """Return absolute deltas in key/fill, brightness/temperature order."""
        return (
            SignedDelta.absolute(self.key_brightness),
            SignedDelta.absolute(self.key_temperature),
            SignedDelta.absolute(self.fill_brightness),
            SignedDelta.absolute(self.fill_temperature),
        )


def minutes_since_midnight(now: datetime) -> int:
    """Return whole minutes since midnight on the wall clock of ``now``."""
    return now.hour * 60 + now.minute


def polynomial(coefficients: Sequence[float], x: float) -> float:
    """Return ``sum(coefficients[i] * x**i)``."""
    result = 0.0
    power = 1.0
    for coefficient in coefficients:
        result += coefficient * power
        power *= x
    return result


def _clamp_truncate(value: float, low: int, high: int) -> int:
    return int(min(max(value, low), high))


def evaluate_minute(minute: int) -> CircadianValues:
    """Return the curve values ``minute`` minutes after midnight."""
    if not 0 <= minute < MINUTES_PER_DAY:
        raise ValueError(f"minute must be within a day, got {minute}")

    brightness = _clamp_truncate(
        polynomial(BRIGHTNESS_COEFFICIENTS, minute),
        const.CIRCADIAN_BRIGHTNESS_MIN,
        const.CIRCADIAN_BRIGHTNESS_MAX,
    )
    temperature = _clamp_truncate(
        polynomial(TEMPERATURE_COEFFICIENTS, minute),
        const.CIRCADIAN_TEMPERATURE_MIN,
        const.CIRCADIAN_TEMPERATURE_MAX,
    )
    return CircadianValues(
        key_brightness=brightness,
        key_temperature=temperature,
        fill_brightness=max(0, brightness - const.FILL_BRIGHTNESS_OFFSET),
        fill_temperature=max(0, temperature - const.FILL_TEMPERATURE_OFFSET),
    )


def evaluate(now: datetime) -> CircadianValues:
    """Return the circadian values for the time of day of ``now``."""
    values = evaluate_minute(minutes_since_midnight(now))
    _LOGGER.debug("Circadian values for %s: %s", now.strftime("%H:%M"), values)
    return values


def curve(step_minutes: int = 60) -> Iterator[tuple[int, CircadianValues]]:
    """Yield ``(minute, values)`` pairs across one day."""
    if step_minutes <= 0:
        raise ValueError("step_minutes must be positive")
    for minute in range(0, MINUTES_PER_DAY, step_minutes):
        yield minute, evaluate_minute(minute)


def format_minute(minute: int) -> str:
    """Return ``minute`` as ``HH:MM``."""
    return (datetime.min + timedelta(minutes=minute)).strftime("%H:%M")

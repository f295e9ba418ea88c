"""Compute the new state of a light from its current state and a request."""
from __future__ import annotations

import dataclasses
import logging

from keylights import const
from keylights.client import Light
from keylights.delta import SignedDelta

_LOGGER = logging.getLogger(__name__)


def apply_delta(value: int, delta: SignedDelta) -> int:
    """Return ``value`` adjusted by ``delta``."""
    if not delta.is_set:
        return value
    if delta.is_relative:
        return value + delta.amount
    return delta.amount


def clamp(value: int, low: int, high: int) -> int:
    """Return ``value`` limited to ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def reconcile(
    current: Light,
    brightness: SignedDelta,
    temperature: SignedDelta,
    *,
    toggle: bool,
) -> Light:
    """Return a copy of ``current`` with the requested changes applied.

    Both values are clamped to the operational range whether or not they were
    changed. With ``toggle`` the light is flipped, otherwise it is turned on.
    """
    new_brightness = clamp(
        apply_delta(current.brightness, brightness),
        const.BRIGHTNESS_MIN,
        const.BRIGHTNESS_MAX,
    )
    new_temperature = clamp(
        apply_delta(current.temperature, temperature),
        const.TEMPERATURE_MIN,
        const.TEMPERATURE_MAX,
    )
    on = not current.on if toggle else True

    _LOGGER.debug(
        "Reconciled %s with brightness=%r temperature=%r toggle=%s",
        current,
        str(brightness),
        str(temperature),
        toggle,
    )
    return dataclasses.replace(
        current, on=on, brightness=new_brightness, temperature=new_temperature
    )

"""Run orchestration: resolve the request, then adjust each light in turn."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from keylights import circadian, const
from keylights.client import Device, KeyLightClient, Light
from keylights.delta import UNSET, SignedDelta
from keylights.errors import DeviceError, KeyLightError, PushError
from keylights.reconcile import reconcile

_LOGGER = logging.getLogger(__name__)

Report = Callable[[str], None]
ClientFactory = Callable[[str], KeyLightClient]


@dataclass(frozen=True, slots=True)
class LightTarget:
    """A light's address and the changes requested for it."""

    name: str
    address: str
    brightness: SignedDelta = UNSET
    temperature: SignedDelta = UNSET

    @property
    def modified(self) -> bool:
        """Return whether any change is requested for this light."""
        return self.brightness.is_set or self.temperature.is_set


@dataclass(frozen=True, slots=True)
class RunState:
    """Everything one invocation needs, resolved up front."""

    info: bool
    circadian: bool
    toggle: bool
    key: LightTarget
    fill: LightTarget

    @property
    def targets(self) -> tuple[LightTarget, LightTarget]:
        """Return the lights in processing order."""
        return self.key, self.fill


def build_run_state(
    *,
    info: bool = False,
    use_circadian: bool = False,
    key: LightTarget,
    fill: LightTarget,
    now: datetime | None = None,
) -> RunState:
    """Resolve the requested changes into a :class:`RunState`.

    In circadian mode the curve values for ``now`` replace the brightness and
    temperature of both targets. The lights are toggled only when no change
    is requested for either of them.
    """
    if use_circadian:
        values = circadian.evaluate(now or datetime.now())
        key_b, key_t, fill_b, fill_t = values.as_deltas()
        key = LightTarget(key.name, key.address, key_b, key_t)
        fill = LightTarget(fill.name, fill.address, fill_b, fill_t)

    toggle = not (key.modified or fill.modified)
    state = RunState(
        info=info, circadian=use_circadian, toggle=toggle, key=key, fill=fill
    )
    _LOGGER.debug("Resolved run state: %s", state)
    return state


def format_light(device: Device, light: Light) -> str:
    """Return the status line for one light."""
    icon = const.ICON_ON if light.on else const.ICON_OFF
    return f"{icon} {device.name} {light.temperature}K {light.brightness}%"


async def async_process_light(
    state: RunState,
    target: LightTarget,
    client: KeyLightClient,
    report: Report = print,
) -> list[Light]:
    """Adjust (or just report) every light behind ``target``."""
    try:
        device = await client.async_accessory_info()
    except KeyLightError as err:
        raise DeviceError(
            f"{target.name} Light: failed to fetch accessory info: {err}"
        ) from err

    try:
        lights = await client.async_lights()
    except KeyLightError as err:
        raise DeviceError(f"{target.name} Light: failed to fetch lights: {err}") from err

    if not state.info:
        lights = [
            reconcile(
                light, target.brightness, target.temperature, toggle=state.toggle
            )
            for light in lights
        ]
        try:
            echoed = await client.async_set_lights(lights)
        except KeyLightError as err:
            raise PushError(f"{target.name} Light: failed to set lights: {err}") from err
        if echoed is not None and len(echoed) == len(lights):
            lights = echoed

    for light in lights:
        report(format_light(device, light))
    return lights


async def _async_run_targets(
    state: RunState, client_factory: ClientFactory, report: Report
) -> dict[str, list[Light]]:
    results: dict[str, list[Light]] = {}
    for target in state.targets:
        try:
            client = client_factory(target.address)
        except KeyLightError as err:
            raise DeviceError(
                f"{target.name} Light: failed to create light client: {err}"
            ) from err
        async with client:
            _LOGGER.debug("Processing %s Light at %s", target.name, target.address)
            results[target.name] = await async_process_light(
                state, target, client, report
            )
    return results


async def async_run(
    state: RunState,
    *,
    client_factory: ClientFactory = KeyLightClient,
    report: Report = print,
    timeout: float = const.DEFAULT_TIMEOUT,
) -> dict[str, list[Light]]:
    """Process the Key Light and then the Fill Light.

    All network calls share one deadline of ``timeout`` seconds. The first
    failure ends the run; the remaining light is not attempted.
    """
    try:
        return await asyncio.wait_for(
            _async_run_targets(state, client_factory, report), timeout=timeout
        )
    except asyncio.TimeoutError as err:
        raise DeviceError(f"timed out after {timeout:.1f}s talking to lights") from err

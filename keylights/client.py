"""Async client for the Key Light local HTTP API."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from aiohttp import ClientError, ClientSession, ClientTimeout

from keylights import const
from keylights.errors import KeyLightClientError

_LOGGER = logging.getLogger(__name__)

_SCHEMES = ("http", "https")


@dataclass(slots=True)
class Device:
    """Identity of a Key Light accessory."""

    product_name: str = ""
    display_name: str = ""
    serial_number: str = ""
    firmware_version: str = ""
    firmware_build_number: int = 0
    hardware_board_type: int = 0

    @property
    def name(self) -> str:
        """Return the name to show for this device."""
        return self.display_name or self.product_name or self.serial_number

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> Device:
        """Build a device from an accessory-info payload."""
        return cls(
            product_name=str(payload.get(const.KEY_PRODUCT_NAME) or ""),
            display_name=str(payload.get(const.KEY_DISPLAY_NAME) or ""),
            serial_number=str(payload.get(const.KEY_SERIAL_NUMBER) or ""),
            firmware_version=str(payload.get(const.KEY_FIRMWARE_VERSION) or ""),
            firmware_build_number=int(
                payload.get(const.KEY_FIRMWARE_BUILD_NUMBER) or 0
            ),
            hardware_board_type=int(payload.get(const.KEY_HARDWARE_BOARD_TYPE) or 0),
        )


@dataclass(slots=True)
class Light:
    """State of a single light; temperature is in Kelvin."""

    on: bool
    brightness: int
    temperature: int

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> Light:
        """Build a light from one entry of the ``lights`` array."""
        return cls(
            on=bool(payload[const.KEY_ON]),
            brightness=int(payload[const.KEY_BRIGHTNESS]),
            temperature=to_kelvin(int(payload[const.KEY_TEMPERATURE])),
        )

    def to_json(self) -> dict[str, int]:
        """Return the wire representation of this light."""
        return {
            const.KEY_ON: int(self.on),
            const.KEY_BRIGHTNESS: self.brightness,
            const.KEY_TEMPERATURE: to_api_temperature(self.temperature),
        }


def to_kelvin(value: int) -> int:
    """Convert a device temperature value to Kelvin."""
    if value <= 0:
        raise ValueError(f"invalid device temperature: {value}")
    if not const.API_TEMPERATURE_MIN <= value <= const.API_TEMPERATURE_MAX:
        _LOGGER.warning("Device reported temperature %d outside of range", value)
    return round(1_000_000 / value)


def to_api_temperature(kelvin: int) -> int:
    """Convert Kelvin to the device temperature value."""
    if kelvin <= 0:
        raise ValueError(f"invalid temperature: {kelvin}K")
    value = round(1_000_000 / kelvin)
    return min(max(value, const.API_TEMPERATURE_MIN), const.API_TEMPERATURE_MAX)


def _validate_address(address: str) -> str:
    parts = urlsplit(address)
    if parts.scheme not in _SCHEMES or not parts.hostname:
        raise KeyLightClientError(
            f"invalid address {address!r}: expected http://host[:port]"
        )
    return address.rstrip("/")


class KeyLightClient:
    """Client for one Key Light accessory."""

    def __init__(
        self,
        address: str,
        *,
        session: ClientSession | None = None,
        timeout: float = const.DEFAULT_TIMEOUT,
    ) -> None:
        self._base_url = _validate_address(address)
        self._session = session
        self._owns_session = session is None
        self._timeout = ClientTimeout(total=timeout)

    async def __aenter__(self) -> KeyLightClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.async_close()

    async def async_close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> ClientSession:
        if self._session is None:
            self._session = ClientSession(timeout=self._timeout)
        return self._session

    async def _request(
        self, method: str, path: str, payload: dict[str, Any] | None = None
    ) -> Any:
        url = f"{self._base_url}{path}"
        _LOGGER.debug("%s %s %s", method, url, payload if payload else "")
        try:
            async with self._get_session().request(
                method, url, json=payload, timeout=self._timeout
            ) as resp:
                if resp.status >= 400:
                    text = await resp.text()
                    raise KeyLightClientError(
                        f"{method} {url} returned HTTP {resp.status}: {text.strip()}"
                    )
                data = await resp.json(content_type=None)
        except (ClientError, asyncio.TimeoutError) as err:
            raise KeyLightClientError(f"{method} {url} failed: {err!r}") from err
        except ValueError as err:
            raise KeyLightClientError(
                f"{method} {url} returned invalid JSON: {err}"
            ) from err
        _LOGGER.debug("%s %s -> %s", method, url, data)
        return data

    async def async_accessory_info(self) -> Device:
        """Fetch the identity of the accessory."""
        data = await self._request("GET", const.PATH_ACCESSORY_INFO)
        if not isinstance(data, dict):
            raise KeyLightClientError(f"unexpected accessory info: {data!r}")
        try:
            return Device.from_json(data)
        except (TypeError, ValueError) as err:
            raise KeyLightClientError(f"malformed accessory info: {err!r}") from err

    async def async_lights(self) -> list[Light]:
        """Fetch the state of every light of the accessory."""
        data = await self._request("GET", const.PATH_LIGHTS)
        return _parse_lights(data)

    async def async_set_lights(self, lights: list[Light]) -> list[Light] | None:
        """Push new state for every light of the accessory.

        Returns the lights echoed back by the device, if it sent any.
        """
        payload = {
            const.KEY_NUMBER_OF_LIGHTS: len(lights),
            const.KEY_LIGHTS: [light.to_json() for light in lights],
        }
        data = await self._request("PUT", const.PATH_LIGHTS, payload)
        if data is None:
            return None
        return _parse_lights(data)


def _parse_lights(data: Any) -> list[Light]:
    if not isinstance(data, dict) or not isinstance(data.get(const.KEY_LIGHTS), list):
        raise KeyLightClientError(f"unexpected lights payload: {data!r}")
    try:
        return [Light.from_json(item) for item in data[const.KEY_LIGHTS]]
    except (KeyError, TypeError, ValueError) as err:
        raise KeyLightClientError(f"malformed light in payload: {err!r}") from err

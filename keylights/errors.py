"""Exceptions raised by keylights."""


class KeyLightError(Exception):
    """Base error for Key Light control."""


class ParseError(KeyLightError, ValueError):
    """A brightness or temperature token could not be parsed."""


class KeyLightClientError(KeyLightError):
    """The HTTP API of a light could not be reached or understood."""


class DeviceError(KeyLightError):
    """Creating a client or reading a light's state failed."""


class PushError(KeyLightError):
    """Writing the new state back to a light failed."""

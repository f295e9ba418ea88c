"""Parsing of absolute and relative adjustment tokens."""
from __future__ import annotations

from dataclasses import dataclass

from keylights.errors import ParseError

_SIGNS = ("+", "-")


@dataclass(frozen=True, slots=True)
class SignedDelta:
    """A requested change to a brightness or temperature value.

    An unset delta leaves the value alone, a relative one is added to it and
    an absolute one replaces it.
    """

    is_set: bool = False
    is_relative: bool = False
    amount: int = 0

    @classmethod
    def absolute(cls, amount: int) -> SignedDelta:
        """Return a delta that replaces the current value with ``amount``."""
        return cls(is_set=True, is_relative=False, amount=amount)

    @classmethod
    def relative(cls, amount: int) -> SignedDelta:
        """Return a delta that adds ``amount`` to the current value."""
        return cls(is_set=True, is_relative=True, amount=amount)

    def __str__(self) -> str:
        if not self.is_set:
            return ""
        if self.is_relative:
            return f"{self.amount:+d}"
        return f"{self.amount:d}"


UNSET = SignedDelta()


def parse_delta(token: str | None) -> SignedDelta:
    """Parse ``token`` into a :class:`SignedDelta`.

    ``""`` means unset, ``"+N"``/``"-N"`` are relative and a bare ``"N"`` is
    absolute.
    """
    if not token:
        return UNSET

    relative = token[0] in _SIGNS
    negative = token[0] == "-"
    digits = token[1:] if relative else token

    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ParseError(f"invalid number {token!r}: expected N, +N or -N")

    try:
        amount = int(digits)
    except ValueError as err:
        raise ParseError(f"invalid number {token!r}: {err}") from err
    if negative:
        amount = -amount
    return SignedDelta(is_set=True, is_relative=relative, amount=amount)

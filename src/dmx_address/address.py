"""
DMX address value and parser.

An address can be written in dotted notation (``"4.465"``, universe then
channel) or as an absolute address across all universes (``"2001"``). Both
spell the same DMXAddress. Parsing is strict: no surrounding whitespace, no
signs, ASCII digits only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from dmx_address.exceptions import DMXParseError, ParseErrorKind
from dmx_address.log import get_logger
from dmx_address.universe import (
    DMX_UNIVERSE_MAX,
    DMX_UNIVERSE_MIN,
    NUMERIC_LIMIT,
    SACN_UNIVERSE_MAX,
    absolute_limit,
    is_valid_dmx_channel,
    is_valid_universe,
    split_absolute,
    to_absolute,
)

logger = get_logger(__name__)

SEPARATOR = "."

_DIGITS = re.compile(r"[0-9]+")
_MAX_DIGITS = len(str(NUMERIC_LIMIT))


@dataclass(frozen=True, order=True)
class DMXAddress:
    """
    A DMX-512 address.

    Holds both the universe/channel pair and the absolute address so
    consumers never have to convert. Instances are immutable and validated
    on construction; ordering follows the absolute address.
    """

    universe: int  # 1-based
    address: int  # 1..512 within the universe
    absolute: int  # (universe - 1) * 512 + address

    def __post_init__(self) -> None:
        for name in ("universe", "address", "absolute"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"DMXAddress.{name} must be int, not {type(value).__name__}")
        if not is_valid_universe(self.universe, SACN_UNIVERSE_MAX):
            raise DMXParseError(ParseErrorKind.UNIVERSE_OUT_OF_RANGE, f"{self.universe}.{self.address}")
        if not is_valid_dmx_channel(self.address):
            raise DMXParseError(ParseErrorKind.ADDRESS_OUT_OF_RANGE, f"{self.universe}.{self.address}")
        if self.absolute != to_absolute(self.universe, self.address):
            raise DMXParseError(ParseErrorKind.ABSOLUTE_OUT_OF_RANGE, str(self.absolute))

    @classmethod
    def parse(cls, text: str, max_universe: int = DMX_UNIVERSE_MAX) -> "DMXAddress":
        """Parse dotted or absolute notation, raising DMXParseError on failure."""
        return try_parse(text, max_universe=max_universe).unwrap()

    def __str__(self) -> str:
        return f"{self.universe}.{self.address:03}"

    def __int__(self) -> int:
        return self.absolute


@dataclass(frozen=True)
class ParseResult:
    """Outcome of try_parse: exactly one of ``address`` and ``error`` is set."""

    text: str
    address: Optional[DMXAddress] = None
    error: Optional[ParseErrorKind] = None

    def __post_init__(self) -> None:
        if (self.address is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of address and error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> DMXAddress:
        """Return the parsed address or raise the matching DMXParseError."""
        if self.address is None:
            raise DMXParseError(self.error, self.text)
        return self.address


def try_parse(text: str, max_universe: int = DMX_UNIVERSE_MAX) -> ParseResult:
    """
    Parse ``text`` without raising for malformed input.

    Args:
        text: ``"universe.address"`` or an absolute address
        max_universe: Highest universe number accepted

    Returns:
        ParseResult holding either the address or the failure reason
    """
    outcome = _parse(text, max_universe)
    if isinstance(outcome, ParseErrorKind):
        logger.debug("dmx_address_rejected", input=text, reason=outcome.value)
        return ParseResult(text=text, error=outcome)
    return ParseResult(text=text, address=outcome)


def parse_dmx_address(text: str, max_universe: int = DMX_UNIVERSE_MAX) -> DMXAddress:
    """Convert ``text`` into a DMXAddress, raising DMXParseError on failure."""
    return try_parse(text, max_universe=max_universe).unwrap()


def _parse(text: str, max_universe: int) -> Union[DMXAddress, ParseErrorKind]:
    if not isinstance(text, str):
        raise TypeError(f"DMX address must be parsed from str, not {type(text).__name__}")
    if not DMX_UNIVERSE_MIN <= max_universe <= SACN_UNIVERSE_MAX:
        raise ValueError(f"max_universe must be between 1 and {SACN_UNIVERSE_MAX}, got {max_universe}")

    if SEPARATOR in text:
        parts = text.split(SEPARATOR)
        if len(parts) != 2:
            return ParseErrorKind.INVALID_FORMAT

        universe = _parse_number(parts[0])
        if isinstance(universe, ParseErrorKind):
            return universe
        address = _parse_number(parts[1])
        if isinstance(address, ParseErrorKind):
            return address

        if not is_valid_universe(universe, max_universe):
            return ParseErrorKind.UNIVERSE_OUT_OF_RANGE
        if not is_valid_dmx_channel(address):
            return ParseErrorKind.ADDRESS_OUT_OF_RANGE
        return DMXAddress(universe, address, to_absolute(universe, address))

    absolute = _parse_number(text)
    if isinstance(absolute, ParseErrorKind):
        return absolute
    if not 1 <= absolute <= absolute_limit(max_universe):
        return ParseErrorKind.ABSOLUTE_OUT_OF_RANGE

    universe, address = split_absolute(absolute)
    return DMXAddress(universe, address, absolute)


def _parse_number(part: str) -> Union[int, ParseErrorKind]:
    """Parse an unsigned 32-bit decimal field."""
    if not _DIGITS.fullmatch(part):
        return ParseErrorKind.INVALID_FORMAT
    # Too many significant digits to fit, whatever they are.
    if len(part.lstrip("0")) > _MAX_DIGITS:
        return ParseErrorKind.NUMERIC_OVERFLOW
    value = int(part)
    if value > NUMERIC_LIMIT:
        return ParseErrorKind.NUMERIC_OVERFLOW
    return value

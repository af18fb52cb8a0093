"""
Exceptions for dmx-address.

Parse failures are described by a ParseErrorKind so callers can branch on
the reason without matching message text.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Reason a text could not be converted into a DMX address."""

    INVALID_FORMAT = "invalid_format"
    UNIVERSE_OUT_OF_RANGE = "universe_out_of_range"
    ADDRESS_OUT_OF_RANGE = "address_out_of_range"
    ABSOLUTE_OUT_OF_RANGE = "absolute_out_of_range"
    NUMERIC_OVERFLOW = "numeric_overflow"


_DESCRIPTIONS = {
    ParseErrorKind.INVALID_FORMAT: "expected 'universe.address' or an absolute address",
    ParseErrorKind.UNIVERSE_OUT_OF_RANGE: "universe out of range",
    ParseErrorKind.ADDRESS_OUT_OF_RANGE: "address must be between 1 and 512",
    ParseErrorKind.ABSOLUTE_OUT_OF_RANGE: "absolute address out of range",
    ParseErrorKind.NUMERIC_OVERFLOW: "number too large",
}


class DMXAddressError(Exception):
    """Base exception for all dmx-address errors."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable


class DMXParseError(DMXAddressError, ValueError):
    """Text or field values do not describe a valid DMX address."""

    def __init__(self, kind: ParseErrorKind, text: str):
        super().__init__(f"Invalid DMX address {text!r}: {_DESCRIPTIONS[kind]}")
        self.kind = kind
        self.text = text

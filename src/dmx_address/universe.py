"""Canonical DMX universe sizing and range helpers."""

from __future__ import annotations

DMX_CHANNEL_COUNT = 512
DMX_CHANNEL_MIN = 1
DMX_CHANNEL_MAX = DMX_CHANNEL_COUNT

DMX_UNIVERSE_MIN = 1
DMX_UNIVERSE_MAX = 512
# Highest universe number sACN (E1.31) can carry.
SACN_UNIVERSE_MAX = 63_999

# Numeric fields are parsed as unsigned 32-bit integers.
NUMERIC_LIMIT = 0xFFFF_FFFF


def is_valid_dmx_channel(channel: int) -> bool:
    """Return True when a channel is a valid 1-based DMX slot."""
    return DMX_CHANNEL_MIN <= channel <= DMX_CHANNEL_MAX


def is_valid_universe(universe: int, max_universe: int = DMX_UNIVERSE_MAX) -> bool:
    """Return True when a universe number lies in ``1..max_universe``."""
    return DMX_UNIVERSE_MIN <= universe <= max_universe


def absolute_limit(max_universe: int = DMX_UNIVERSE_MAX) -> int:
    """Return the highest absolute address reachable with ``max_universe`` universes."""
    return max_universe * DMX_CHANNEL_COUNT


def to_absolute(universe: int, address: int) -> int:
    return (universe - 1) * DMX_CHANNEL_COUNT + address


def split_absolute(absolute: int) -> tuple[int, int]:
    """Decompose a 1-based absolute address into ``(universe, address)``."""
    universe, offset = divmod(absolute - 1, DMX_CHANNEL_COUNT)
    return universe + 1, offset + 1

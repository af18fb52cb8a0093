from __future__ import annotations

import dataclasses

import pytest

from dmx_address import DMXAddress, DMXParseError, ParseErrorKind, try_parse
from dmx_address.universe import DMX_CHANNEL_COUNT, DMX_UNIVERSE_MAX


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (DMXAddress(1, 342, 342), "1.342"),
        (DMXAddress(1, 12, 12), "1.012"),
        (DMXAddress(1, 9, 9), "1.009"),
        (DMXAddress(512, 512, 262144), "512.512"),
    ],
)
def test_display(value: DMXAddress, expected: str) -> None:
    assert str(value) == expected
    assert f"{value}" == expected


def test_int_is_absolute() -> None:
    assert int(DMXAddress(3, 210, 1234)) == 1234


def test_value_is_immutable() -> None:
    value = DMXAddress(1, 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.address = 2  # type: ignore[misc]


def test_values_are_hashable_and_ordered() -> None:
    values = [DMXAddress.parse(text) for text in ("2.1", "1.512", "1.1", "1.1")]
    assert len(set(values)) == 3
    assert [v.absolute for v in sorted(values)] == [1, 1, 512, 513]


@pytest.mark.parametrize(
    ("fields", "kind"),
    [
        ((0, 1, 1), ParseErrorKind.UNIVERSE_OUT_OF_RANGE),
        ((64_000, 1, 63_999 * 512 + 1), ParseErrorKind.UNIVERSE_OUT_OF_RANGE),
        ((1, 0, 0), ParseErrorKind.ADDRESS_OUT_OF_RANGE),
        ((1, 513, 513), ParseErrorKind.ADDRESS_OUT_OF_RANGE),
        ((2, 1, 1), ParseErrorKind.ABSOLUTE_OUT_OF_RANGE),
    ],
)
def test_construction_rejects_inconsistent_fields(fields: tuple[int, int, int], kind: ParseErrorKind) -> None:
    with pytest.raises(DMXParseError) as excinfo:
        DMXAddress(*fields)
    assert excinfo.value.kind is kind


def test_every_dotted_pair_round_trips_through_absolute() -> None:
    for universe in range(1, DMX_UNIVERSE_MAX + 1):
        for address in range(1, DMX_CHANNEL_COUNT + 1):
            dotted = DMXAddress.parse(f"{universe}.{address}")
            assert dotted.absolute == (universe - 1) * 512 + address

            absolute = DMXAddress.parse(str(dotted.absolute))
            assert (absolute.universe, absolute.address) == (universe, address)


def test_every_absolute_agrees_with_dotted_form() -> None:
    for absolute in range(1, DMX_UNIVERSE_MAX * DMX_CHANNEL_COUNT + 1):
        value = try_parse(str(absolute)).unwrap()
        assert try_parse(f"{value.universe}.{value.address}").unwrap() == value


@pytest.mark.parametrize("text", ["1.1", "4.465", "1024", "262144", "7.009"])
def test_canonical_forms_reparse_to_same_value(text: str) -> None:
    value = DMXAddress.parse(text)
    assert DMXAddress.parse(str(value.absolute)) == value
    assert DMXAddress.parse(str(value)) == value


@pytest.mark.parametrize(
    "fields",
    [
        (True, True, True),
        (1, 1.0, 1),
        ("1", 1, 1),
        (1, 1, None),
    ],
)
def test_construction_rejects_non_int_fields(fields: tuple) -> None:
    with pytest.raises(TypeError):
        DMXAddress(*fields)

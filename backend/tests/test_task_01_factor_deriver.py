"""Task-01: default factor deriver unit tests

Pure lookup logic, tested without any external dependency.
"""

from __future__ import annotations

import dataclasses
import logging
from types import MappingProxyType

import pytest

from estate_pricing.engine.factors import (
    DEFAULT_FACTOR_TABLES,
    apartment_type_factor,
    balcony_factor,
    derive_factors,
    direction_factor,
    floor_factor,
    parking_factor,
    room_count_factor,
    storage_factor,
)
from estate_pricing.errors import InvalidAreaError, InvalidAttributeError
from estate_pricing.schemas.pricing import FactorSet
from estate_pricing.schemas.unit import ApartmentType, Direction, UnitAttributes, parse_direction


# ---------------------------------------------------------------------------
# T-1: floor breakpoints
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("floor", "expected"),
    [(-2, 0.90), (0, 0.90), (1, 0.95), (2, 1.00), (3, 1.00), (4, 1.05), (6, 1.05), (7, 1.10), (10, 1.10), (11, 1.15), (30, 1.15)],
)
def test_floor_factor_breakpoints(floor, expected):
    assert floor_factor(floor) == expected


def test_floor_factor_absent_defaults_to_first_floor():
    """No floor number is treated as floor 1."""
    assert floor_factor(None) == 0.95


# ---------------------------------------------------------------------------
# T-2: direction lookup
# ---------------------------------------------------------------------------


def test_direction_factor_tokens():
    assert direction_factor("south") == 1.10
    assert direction_factor("west") == 1.05
    assert direction_factor("southwest") == 1.15
    assert direction_factor("southeast") == 1.08
    assert direction_factor("east") == 1.00
    assert direction_factor("north") == 0.95
    assert direction_factor("northwest") == 0.98
    assert direction_factor("northeast") == 0.92


def test_direction_factor_case_insensitive_and_enum():
    assert direction_factor("SOUTH") == 1.10
    assert direction_factor(" South-West ") == 1.15
    assert direction_factor(Direction.NORTHEAST) == 0.92


def test_direction_factor_localized_labels():
    """Hebrew labels resolve to the same factor, with hyphen or space."""
    assert direction_factor("דרום") == 1.10
    assert direction_factor("דרום-מערב") == 1.15
    assert direction_factor("צפון מזרח") == 0.92


def test_direction_factor_unknown_is_neutral_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="estate_pricing.engine.factors"):
        assert direction_factor("souht") == 1.00
    assert "souht" in caplog.text
    assert direction_factor(None) == 1.00


def test_parse_direction():
    assert parse_direction("Northwest") is Direction.NORTHWEST
    assert parse_direction("צפון-מערב") is Direction.NORTHWEST
    assert parse_direction("up") is None
    assert Direction.SOUTH.label == "דרום"


# ---------------------------------------------------------------------------
# T-3: parking / storage linear factors
# ---------------------------------------------------------------------------


def test_parking_and_storage_factors():
    assert parking_factor(0) == 1.0
    assert parking_factor(1) == pytest.approx(1.08)
    assert parking_factor(3) == pytest.approx(1.24)
    assert storage_factor(0) == 1.0
    assert storage_factor(2) == pytest.approx(1.10)


# ---------------------------------------------------------------------------
# T-4: balcony ratio
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("balcony", "expected"),
    [(60, 1.15), (50, 1.10), (31, 1.10), (30, 1.05), (16, 1.05), (15, 1.02), (1, 1.02)],
)
def test_balcony_factor_ratios(balcony, expected):
    assert balcony_factor(balcony, 100) == expected


def test_zero_balcony_is_exactly_neutral():
    """No balcony gives 1.0 regardless of built area, even a zero one."""
    assert balcony_factor(0, 100) == 1.0
    assert balcony_factor(0, 0) == 1.0
    assert balcony_factor(0, 5_000) == 1.0


# ---------------------------------------------------------------------------
# T-5: apartment type and room count
# ---------------------------------------------------------------------------


def test_apartment_type_factor():
    assert apartment_type_factor(ApartmentType.PENTHOUSE) == 1.30
    assert apartment_type_factor("duplex") == 1.15
    assert apartment_type_factor("garden") == 1.10
    assert apartment_type_factor("mini_penthouse") == 1.20
    assert apartment_type_factor("six_plus_room") == 1.05
    assert apartment_type_factor("studio") == 1.00


def test_apartment_type_table_is_exhaustive():
    assert set(DEFAULT_FACTOR_TABLES.apartment_type) == set(ApartmentType)
    assert set(DEFAULT_FACTOR_TABLES.direction) == set(Direction)


def test_apartment_type_unknown_rejected():
    with pytest.raises(ValueError):
        apartment_type_factor("castle")


@pytest.mark.parametrize(
    ("rooms", "expected"),
    [(5, 1.10), (7.5, 1.10), (4, 1.05), (3, 1.00), (3.0, 1.00), (2, 0.98), (1, 0.95), (2.5, 0.90), (0.5, 0.90)],
)
def test_room_count_factor(rooms, expected):
    assert room_count_factor(rooms) == expected


def test_room_count_absent_defaults_to_two():
    assert room_count_factor(None) == 0.98


# ---------------------------------------------------------------------------
# T-6: full derivation
# ---------------------------------------------------------------------------


def test_derive_factors_reference_unit():
    unit = UnitAttributes(
        built_area=100,
        floor_number=5,
        direction="south",
        parking_spots=1,
        apartment_type=ApartmentType.THREE_ROOM,
        room_count=3,
    )

    factors = derive_factors(unit)

    assert factors.floor == 1.05
    assert factors.direction == 1.10
    assert factors.parking == pytest.approx(1.08)
    assert factors.storage == 1.00
    assert factors.balcony == 1.00
    assert factors.apartment_type == 1.00
    assert factors.room_count == 1.00


def test_derive_factors_defaults_for_missing_attributes():
    """Absent optional attributes never raise."""
    factors = derive_factors(UnitAttributes(built_area=80))

    assert factors == FactorSet(floor=0.95, room_count=0.98)


@pytest.mark.parametrize("built_area", [0, -10])
def test_derive_factors_rejects_non_positive_built_area(built_area):
    with pytest.raises(InvalidAreaError):
        derive_factors(UnitAttributes(built_area=built_area))


@pytest.mark.parametrize("field", ["parking_spots", "storage_rooms"])
def test_derive_factors_rejects_negative_counts(field):
    """Negative counts would push the factor to zero or below."""
    with pytest.raises(InvalidAttributeError, match=field):
        derive_factors(UnitAttributes(built_area=100, **{field: -13}))


def test_derive_factors_rejects_negative_balcony_area():
    with pytest.raises(InvalidAreaError, match="balcony"):
        derive_factors(UnitAttributes(built_area=100, garden_balcony_area=-5))


def test_derive_factors_with_substitute_tables():
    """Tables are plain values; callers may swap them."""
    flat = dataclasses.replace(
        DEFAULT_FACTOR_TABLES,
        parking_step=0.10,
        direction=MappingProxyType({d: 1.0 for d in Direction}),
    )
    unit = UnitAttributes(built_area=100, direction="south", parking_spots=2)

    factors = derive_factors(unit, flat)

    assert factors.direction == 1.0
    assert factors.parking == pytest.approx(1.20)
    # defaults untouched
    assert derive_factors(unit).direction == 1.10

"""Default factor deriver - unit attributes to per-dimension factors"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from estate_pricing.errors import InvalidAreaError, InvalidAttributeError
from estate_pricing.schemas.pricing import FactorSet
from estate_pricing.schemas.unit import ApartmentType, Direction, UnitAttributes, parse_direction

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# 1. Lookup tables
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FactorTables:
    """Breakpoint and lookup tables used by derive_factors.

    Breakpoint tuples are (bound, factor) pairs. Floors pick the first pair
    whose bound is >= the floor; balcony ratios pick the first pair whose
    bound the ratio strictly exceeds.
    """

    floor_breakpoints: tuple[tuple[int, float], ...] = (
        (0, 0.90),  # basement
        (1, 0.95),  # ground
        (3, 1.00),
        (6, 1.05),
        (10, 1.10),
    )
    floor_top: float = 1.15
    default_floor: int = 1

    direction: Mapping[Direction, float] = field(
        default_factory=lambda: MappingProxyType({
            Direction.SOUTH: 1.10,
            Direction.WEST: 1.05,
            Direction.SOUTHWEST: 1.15,
            Direction.SOUTHEAST: 1.08,
            Direction.EAST: 1.00,
            Direction.NORTH: 0.95,
            Direction.NORTHWEST: 0.98,
            Direction.NORTHEAST: 0.92,
        })
    )
    direction_default: float = 1.00

    parking_step: float = 0.08
    storage_step: float = 0.05

    balcony_breakpoints: tuple[tuple[float, float], ...] = (
        (0.50, 1.15),
        (0.30, 1.10),
        (0.15, 1.05),
    )
    balcony_small: float = 1.02

    apartment_type: Mapping[ApartmentType, float] = field(
        default_factory=lambda: MappingProxyType({
            ApartmentType.STUDIO: 1.00,
            ApartmentType.ONE_ROOM: 1.00,
            ApartmentType.TWO_ROOM: 1.00,
            ApartmentType.THREE_ROOM: 1.00,
            ApartmentType.FOUR_ROOM: 1.00,
            ApartmentType.FIVE_ROOM: 1.00,
            ApartmentType.SIX_PLUS_ROOM: 1.05,
            ApartmentType.PENTHOUSE: 1.30,
            ApartmentType.DUPLEX: 1.15,
            ApartmentType.GARDEN: 1.10,
            ApartmentType.MINI_PENTHOUSE: 1.20,
        })
    )

    room_count_exact: Mapping[float, float] = field(
        default_factory=lambda: MappingProxyType({
            4: 1.05,
            3: 1.00,
            2: 0.98,
            1: 0.95,
        })
    )
    room_count_large_from: float = 5
    room_count_large: float = 1.10
    room_count_other: float = 0.90
    default_room_count: float = 2


DEFAULT_FACTOR_TABLES = FactorTables()


# ---------------------------------------------------------------------------
# 2. Per-dimension factors
# ---------------------------------------------------------------------------


def floor_factor(floor_number: int | None, tables: FactorTables = DEFAULT_FACTOR_TABLES) -> float:
    """Higher floors are worth more; basements and ground floors less."""
    floor = tables.default_floor if floor_number is None else floor_number
    for bound, factor in tables.floor_breakpoints:
        if floor <= bound:
            return factor
    return tables.floor_top


def direction_factor(
    direction: Direction | str | None,
    tables: FactorTables = DEFAULT_FACTOR_TABLES,
) -> float:
    """South and west exposures carry a premium, north a discount.

    Absent or unrecognized directions fall back to direction_default.
    """
    if direction is None:
        return tables.direction_default
    resolved = parse_direction(direction)
    if resolved is None:
        logger.warning("unrecognized direction %r, using neutral factor", direction)
        return tables.direction_default
    return tables.direction[resolved]


def parking_factor(parking_spots: int, tables: FactorTables = DEFAULT_FACTOR_TABLES) -> float:
    """Each parking spot adds parking_step (8%)."""
    return 1 + parking_spots * tables.parking_step


def storage_factor(storage_rooms: int, tables: FactorTables = DEFAULT_FACTOR_TABLES) -> float:
    """Each storage room adds storage_step (5%)."""
    return 1 + storage_rooms * tables.storage_step


def balcony_factor(
    balcony_area: float,
    built_area: float,
    tables: FactorTables = DEFAULT_FACTOR_TABLES,
) -> float:
    """Premium by balcony/garden share of the built area.

    No balcony means exactly 1.0, whatever the built area.
    """
    if balcony_area <= 0:
        return 1.0
    if not built_area > 0:
        raise InvalidAreaError(f"built area must be greater than zero (got {built_area})")
    ratio = balcony_area / built_area
    for bound, factor in tables.balcony_breakpoints:
        if ratio > bound:
            return factor
    return tables.balcony_small


def apartment_type_factor(
    apartment_type: ApartmentType | str,
    tables: FactorTables = DEFAULT_FACTOR_TABLES,
) -> float:
    return tables.apartment_type[ApartmentType(apartment_type)]


def room_count_factor(room_count: float | None, tables: FactorTables = DEFAULT_FACTOR_TABLES) -> float:
    """Larger layouts carry a premium.

    Only whole counts up to 4 have their own entry; half rooms below 5 and
    anything under one room fall into room_count_other.
    """
    rooms = tables.default_room_count if room_count is None else room_count
    if rooms >= tables.room_count_large_from:
        return tables.room_count_large
    return tables.room_count_exact.get(rooms, tables.room_count_other)


# ---------------------------------------------------------------------------
# 3. Factor set
# ---------------------------------------------------------------------------


def derive_factors(unit: UnitAttributes, tables: FactorTables = DEFAULT_FACTOR_TABLES) -> FactorSet:
    """Derive all seven factors for a unit.

    Raises:
        InvalidAreaError: built_area is zero or negative, or the balcony area is negative.
        InvalidAttributeError: parking_spots or storage_rooms is negative.
    """
    if not unit.built_area > 0:
        raise InvalidAreaError(f"built area must be greater than zero (got {unit.built_area})")
    if not unit.garden_balcony_area >= 0:
        raise InvalidAreaError(f"garden/balcony area must not be negative (got {unit.garden_balcony_area})")
    for name in ("parking_spots", "storage_rooms"):
        count = getattr(unit, name)
        if count < 0:
            raise InvalidAttributeError(f"{name} must not be negative (got {count})")

    factors = FactorSet(
        floor=floor_factor(unit.floor_number, tables),
        direction=direction_factor(unit.direction, tables),
        parking=parking_factor(unit.parking_spots, tables),
        storage=storage_factor(unit.storage_rooms, tables),
        balcony=balcony_factor(unit.garden_balcony_area, unit.built_area, tables),
        apartment_type=apartment_type_factor(unit.apartment_type, tables),
        room_count=room_count_factor(unit.room_count, tables),
    )
    logger.debug("derived factors: %s", factors)
    return factors

"""Unit attribute schema consumed by the pricing engine"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"

    @property
    def label(self) -> str:
        """Localized (Hebrew) label shown in the back-office UI."""
        return DIRECTION_LABELS[self]


DIRECTION_LABELS: dict[Direction, str] = {
    Direction.NORTH: "צפון",
    Direction.SOUTH: "דרום",
    Direction.EAST: "מזרח",
    Direction.WEST: "מערב",
    Direction.NORTHEAST: "צפון-מזרח",
    Direction.NORTHWEST: "צפון-מערב",
    Direction.SOUTHEAST: "דרום-מזרח",
    Direction.SOUTHWEST: "דרום-מערב",
}


class ApartmentType(str, Enum):
    STUDIO = "studio"
    ONE_ROOM = "one_room"
    TWO_ROOM = "two_room"
    THREE_ROOM = "three_room"
    FOUR_ROOM = "four_room"
    FIVE_ROOM = "five_room"
    SIX_PLUS_ROOM = "six_plus_room"
    PENTHOUSE = "penthouse"
    DUPLEX = "duplex"
    GARDEN = "garden"
    MINI_PENTHOUSE = "mini_penthouse"


def _normalize_token(value: str) -> str:
    return "".join(value.split()).replace("-", "").replace("_", "").casefold()


_DIRECTION_LOOKUP: dict[str, Direction] = {}
for _direction in Direction:
    _DIRECTION_LOOKUP[_normalize_token(_direction.value)] = _direction
    _DIRECTION_LOOKUP[_normalize_token(DIRECTION_LABELS[_direction])] = _direction


def parse_direction(value: Direction | str | None) -> Direction | None:
    """Resolve an enum token or localized label to a Direction.

    Matching ignores case, whitespace, hyphens and underscores, so
    "South-West", "southwest" and "דרום מערב" all resolve. Returns None for
    absent or unrecognized values.
    """
    if value is None or isinstance(value, Direction):
        return value
    return _DIRECTION_LOOKUP.get(_normalize_token(value))


@dataclass(frozen=True)
class UnitAttributes:
    """Physical attributes of a single unit.

    total_area defaults to built_area + garden_balcony_area when omitted.
    """

    built_area: float
    apartment_type: ApartmentType = ApartmentType.THREE_ROOM
    garden_balcony_area: float = 0.0
    total_area: float | None = None
    room_count: float | None = None
    direction: Direction | str | None = None
    floor_number: int | None = None
    parking_spots: int = 0
    storage_rooms: int = 0
    marketing_price: float | None = None
    linear_price: float | None = None

    @property
    def effective_total_area(self) -> float:
        if self.total_area is not None:
            return self.total_area
        return self.built_area + self.garden_balcony_area

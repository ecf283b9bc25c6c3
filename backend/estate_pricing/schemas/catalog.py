"""Per-project factor catalog schema"""

from dataclasses import dataclass, field

from estate_pricing.schemas.unit import ApartmentType, Direction

SCALAR_FIELDS = ("floor_factor", "parking_factor", "storage_factor", "balcony_garden_factor")
MAP_FIELDS = ("direction_factor", "unit_type_factor", "room_count_factor")

# "1", "1.5", ..., "6"
ROOM_COUNT_LABELS: tuple[str, ...] = tuple(
    f"{n / 2:g}" for n in range(2, 13)
)

REQUIRED_KEYS: dict[str, frozenset[str]] = {
    "direction_factor": frozenset(d.value for d in Direction),
    "unit_type_factor": frozenset(t.value for t in ApartmentType),
    "room_count_factor": frozenset(ROOM_COUNT_LABELS),
}


@dataclass(frozen=True)
class FactorCatalog:
    """Operator-editable factors for one project"""

    floor_factor: float = 1.0
    parking_factor: float = 1.0
    storage_factor: float = 1.0
    balcony_garden_factor: float = 1.0
    direction_factor: dict[str, float] = field(default_factory=dict)
    unit_type_factor: dict[str, float] = field(default_factory=dict)
    room_count_factor: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "floor_factor": self.floor_factor,
            "parking_factor": self.parking_factor,
            "storage_factor": self.storage_factor,
            "balcony_garden_factor": self.balcony_garden_factor,
            "direction_factor": dict(self.direction_factor),
            "unit_type_factor": dict(self.unit_type_factor),
            "room_count_factor": dict(self.room_count_factor),
        }

"""Factor and price result schemas"""

from dataclasses import astuple, dataclass, field
from enum import Enum


class FactorLabel(str, Enum):
    PREMIUM = "premium"
    NEUTRAL = "neutral"
    DISCOUNT = "discount"


@dataclass(frozen=True)
class FactorSet:
    """Per-dimension multiplicative factors (1.0 = neutral baseline)"""

    floor: float = 1.0
    direction: float = 1.0
    parking: float = 1.0
    storage: float = 1.0
    balcony: float = 1.0
    apartment_type: float = 1.0
    room_count: float = 1.0

    def values(self) -> tuple[float, ...]:
        return astuple(self)


@dataclass(frozen=True)
class PriceFigures:
    """Composed price figures; recomputed on every input change"""

    base_price_per_area: float
    total_factor: float
    adjusted_price_per_area: int
    total_adjusted_price: int
    equivalent_price_per_area: int
    premium_discount_percent: float


@dataclass(frozen=True)
class Reconciliation:
    """Computed price vs. marketing price"""

    marketing_price: float
    total_adjusted_price: float
    variance_amount: float
    variance_percent: float


@dataclass(frozen=True)
class UnitAppraisal:
    """Full appraisal of one unit"""

    factors: FactorSet
    figures: PriceFigures
    reconciliation: Reconciliation | None = None
    labels: dict[str, FactorLabel] = field(default_factory=dict)


@dataclass(frozen=True)
class ListingPriceSummary:
    """Per-area view of a unit's listed prices"""

    final_price: float = 0.0
    marketing_per_area: int = 0
    linear_per_area: int = 0
    final_per_area: int = 0

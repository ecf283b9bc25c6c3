"""Price composer - factors and base price to price figures"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from estate_pricing.errors import InvalidAreaError, PricingError
from estate_pricing.schemas.pricing import FactorLabel, FactorSet, PriceFigures

PREMIUM_THRESHOLD = 1.05
DISCOUNT_THRESHOLD = 0.95


# ---------------------------------------------------------------------------
# 1. Rounding
# ---------------------------------------------------------------------------


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero on the shortest decimal repr of value.

    Going through repr keeps 31185.000000000007 at 31185 and 2.675 at 2.68,
    so figures do not depend on binary float artefacts.

    Raises:
        PricingError: value is infinite or NaN.
    """
    if not math.isfinite(value):
        raise PricingError(f"cannot round a non-finite amount ({value})")
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # room for every integer digit of the largest float
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        return float(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def round_currency(value: float) -> int:
    return int(round_half_up(value))


# ---------------------------------------------------------------------------
# 2. Factor summary
# ---------------------------------------------------------------------------


def total_factor(factors: FactorSet) -> float:
    return math.prod(factors.values())


def classify_factor(factor: float) -> FactorLabel:
    """premium above 1.05, discount below 0.95, neutral otherwise."""
    if factor > PREMIUM_THRESHOLD:
        return FactorLabel.PREMIUM
    if factor < DISCOUNT_THRESHOLD:
        return FactorLabel.DISCOUNT
    return FactorLabel.NEUTRAL


def label_factors(factors: FactorSet) -> dict[str, FactorLabel]:
    labels = {name: classify_factor(value) for name, value in vars(factors).items()}
    labels["total"] = classify_factor(total_factor(factors))
    return labels


# ---------------------------------------------------------------------------
# 3. Composition
# ---------------------------------------------------------------------------


def compose_price(
    factors: FactorSet,
    base_price_per_area: float,
    built_area: float,
    total_area: float,
) -> PriceFigures:
    """Apply the combined factor to a base price per area.

    - adjusted price/area = base x total factor
    - total adjusted price = adjusted price/area x built area
    - equivalent price/area = total adjusted price / total area (balcony included)
    - premium/discount % = (total factor - 1) x 100

    Raises:
        InvalidAreaError: total_area is zero or negative.
    """
    if not total_area > 0:
        raise InvalidAreaError(f"total area must be greater than zero (got {total_area})")

    combined = total_factor(factors)
    adjusted = round_currency(base_price_per_area * combined)
    total_price = round_currency(adjusted * built_area)
    equivalent = round_currency(total_price / total_area)

    return PriceFigures(
        base_price_per_area=base_price_per_area,
        total_factor=combined,
        adjusted_price_per_area=adjusted,
        total_adjusted_price=total_price,
        equivalent_price_per_area=equivalent,
        premium_discount_percent=round_half_up((combined - 1) * 100, 2),
    )

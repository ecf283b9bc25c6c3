"""Market reconciler - computed price vs. marketing price"""

from __future__ import annotations

from estate_pricing.engine.composer import round_currency, round_half_up
from estate_pricing.errors import DivisionByZeroError, InvalidAreaError
from estate_pricing.schemas.pricing import ListingPriceSummary, Reconciliation


def reconcile(total_adjusted_price: float, marketing_price: float) -> Reconciliation:
    """Compare the composed total price with the asking price.

    A positive variance means the asking price is above the computed value.

    Raises:
        DivisionByZeroError: total_adjusted_price is zero.
    """
    if total_adjusted_price == 0:
        raise DivisionByZeroError("cannot reconcile against a zero computed price")

    variance = marketing_price - total_adjusted_price
    return Reconciliation(
        marketing_price=marketing_price,
        total_adjusted_price=total_adjusted_price,
        variance_amount=variance,
        variance_percent=round_half_up(variance / total_adjusted_price * 100, 1),
    )


def listing_price_summary(
    total_area: float,
    marketing_price: float | None = None,
    linear_price: float | None = None,
    discount_percent: float = 0.0,
) -> ListingPriceSummary:
    """Per-area figures for the listed prices of a unit.

    The final price is the marketing price after the negotiated discount.
    Missing prices count as zero.
    """
    if not total_area > 0:
        raise InvalidAreaError(f"total area must be greater than zero (got {total_area})")
    if not 0 <= discount_percent <= 100:
        raise ValueError(f"discount must be between 0 and 100 percent (got {discount_percent})")

    marketing = marketing_price or 0.0
    linear = linear_price or 0.0
    final = marketing * (1 - discount_percent / 100)

    return ListingPriceSummary(
        final_price=final,
        marketing_per_area=round_currency(marketing / total_area),
        linear_per_area=round_currency(linear / total_area),
        final_per_area=round_currency(final / total_area),
    )

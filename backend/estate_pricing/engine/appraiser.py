"""Unit appraiser - derive, compose and reconcile for a single unit"""

from __future__ import annotations

import logging

from estate_pricing.engine.composer import compose_price, label_factors
from estate_pricing.engine.factors import DEFAULT_FACTOR_TABLES, FactorTables, derive_factors
from estate_pricing.engine.reconciler import reconcile
from estate_pricing.errors import InvalidAreaError
from estate_pricing.schemas.pricing import UnitAppraisal
from estate_pricing.schemas.unit import UnitAttributes

logger = logging.getLogger(__name__)


def appraise_unit(
    unit: UnitAttributes,
    base_price_per_area: float,
    tables: FactorTables = DEFAULT_FACTOR_TABLES,
) -> UnitAppraisal:
    """Appraise one unit.

    Flow:
    1. validate areas (total area may not be smaller than built area)
    2. derive the seven factors
    3. compose the price figures
    4. reconcile against the marketing price, when the unit has one
    """
    total_area = unit.effective_total_area
    if total_area < unit.built_area:
        raise InvalidAreaError(
            f"total area ({total_area}) must not be smaller than built area ({unit.built_area})"
        )

    factors = derive_factors(unit, tables)
    figures = compose_price(factors, base_price_per_area, unit.built_area, total_area)

    reconciliation = None
    if unit.marketing_price:
        reconciliation = reconcile(figures.total_adjusted_price, unit.marketing_price)

    logger.info(
        "appraisal done: factor=%.4f, equivalent=%s/area, total=%s",
        figures.total_factor,
        f"{figures.equivalent_price_per_area:,}",
        f"{figures.total_adjusted_price:,}",
    )

    return UnitAppraisal(
        factors=factors,
        figures=figures,
        reconciliation=reconciliation,
        labels=label_factors(factors),
    )

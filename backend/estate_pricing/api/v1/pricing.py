"""Equivalent pricing endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from estate_pricing.config import settings
from estate_pricing.engine.appraiser import appraise_unit
from estate_pricing.engine.reconciler import listing_price_summary, reconcile
from estate_pricing.errors import PricingError
from estate_pricing.schemas.requests import ListingSummaryRequest, ReconcileRequest, UnitQuoteRequest

logger = logging.getLogger("estate_pricing.api.pricing")

router = APIRouter()


@router.post("/quote")
async def quote_unit(body: UnitQuoteRequest) -> dict:
    """Compute the equivalent price of a unit.

    Uses the configured base price per area when the request has none, and
    reconciles against the marketing price when one is given.
    """
    base_price = body.base_price_per_area or settings.default_base_price_per_area
    try:
        appraisal = appraise_unit(body.to_unit(), base_price)
    except PricingError as exc:
        logger.debug("quote rejected: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return {
        "factors": asdict(appraisal.factors),
        "labels": {name: label.value for name, label in appraisal.labels.items()},
        "figures": asdict(appraisal.figures),
        "reconciliation": asdict(appraisal.reconciliation) if appraisal.reconciliation else None,
    }


@router.post("/reconcile")
async def reconcile_price(body: ReconcileRequest) -> dict:
    """Compare a computed total price with a marketing price."""
    try:
        result = reconcile(body.total_adjusted_price, body.marketing_price)
    except PricingError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return asdict(result)


@router.post("/listing-summary")
async def listing_summary(body: ListingSummaryRequest) -> dict:
    """Per-area marketing, linear and final prices."""
    try:
        summary = listing_price_summary(
            body.total_area,
            marketing_price=body.marketing_price,
            linear_price=body.linear_price,
            discount_percent=body.discount_percent,
        )
    except PricingError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return asdict(summary)

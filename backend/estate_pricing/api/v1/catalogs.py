"""Per-project pricing factor catalog endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from estate_pricing.api.deps import get_catalog_store
from estate_pricing.engine.catalog import catalog_from_dict, merge_catalog
from estate_pricing.errors import InvalidFactorError
from estate_pricing.schemas.catalog import FactorCatalog
from estate_pricing.schemas.requests import FactorCatalogPatch, FactorCatalogPayload
from estate_pricing.stores.catalog_store import FactorCatalogStore

logger = logging.getLogger("estate_pricing.api.catalogs")

router = APIRouter()


async def _response(project_id: str, catalog: FactorCatalog, store: FactorCatalogStore) -> dict:
    return {
        "project_id": project_id,
        "is_default": not await store.exists(project_id),
        **catalog.to_dict(),
    }


async def _save(project_id: str, catalog: FactorCatalog, store: FactorCatalogStore) -> dict:
    try:
        await store.upsert(project_id, catalog)
    except InvalidFactorError as exc:
        logger.debug("catalog rejected for project %s: %s", project_id, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return await _response(project_id, await store.get(project_id), store)


@router.get("/{project_id}/pricing-factors")
async def get_pricing_factors(
    project_id: str,
    store: FactorCatalogStore = Depends(get_catalog_store),
) -> dict:
    """Project factor catalog; defaults (not saved) when the project has none."""
    return await _response(project_id, await store.get(project_id), store)


@router.put("/{project_id}/pricing-factors")
async def replace_pricing_factors(
    project_id: str,
    body: FactorCatalogPayload,
    store: FactorCatalogStore = Depends(get_catalog_store),
) -> dict:
    """Replace the whole catalog. Every map must carry all of its keys."""
    return await _save(project_id, catalog_from_dict(body.model_dump()), store)


@router.patch("/{project_id}/pricing-factors")
async def update_pricing_factors(
    project_id: str,
    body: FactorCatalogPatch,
    store: FactorCatalogStore = Depends(get_catalog_store),
) -> dict:
    """Merge a partial edit onto the current catalog and save the result."""
    current = await store.get(project_id)
    merged = merge_catalog(current, body.model_dump(exclude_none=True))
    return await _save(project_id, merged, store)

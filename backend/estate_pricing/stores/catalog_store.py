"""Factor catalog persistence.

get() never persists: a project without a stored row gets a fresh default
catalog. upsert() validates and replaces the whole row, last writer wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from estate_pricing.engine.catalog import default_catalog, validate_catalog
from estate_pricing.models.factor_catalog import PricingFactorCatalog
from estate_pricing.schemas.catalog import MAP_FIELDS, SCALAR_FIELDS, FactorCatalog

logger = logging.getLogger(__name__)


class FactorCatalogStore(Protocol):
    async def get(self, project_id: str) -> FactorCatalog: ...

    async def exists(self, project_id: str) -> bool: ...

    async def upsert(self, project_id: str, catalog: FactorCatalog) -> None: ...


def _to_catalog(row: PricingFactorCatalog) -> FactorCatalog:
    return FactorCatalog(
        **{name: getattr(row, name) for name in SCALAR_FIELDS},
        **{name: dict(getattr(row, name) or {}) for name in MAP_FIELDS},
    )


@dataclass
class SqlFactorCatalogStore:
    """Catalog store backed by the apartment_pricing_factors table."""

    session: AsyncSession

    async def _get_row(self, project_id: str) -> PricingFactorCatalog | None:
        result = await self.session.execute(
            select(PricingFactorCatalog).where(PricingFactorCatalog.project_id == project_id)
        )
        return result.scalar_one_or_none()

    async def get(self, project_id: str) -> FactorCatalog:
        row = await self._get_row(project_id)
        if row is None:
            logger.debug("no catalog for project %s, using defaults", project_id)
            return default_catalog()
        return _to_catalog(row)

    async def exists(self, project_id: str) -> bool:
        return await self._get_row(project_id) is not None

    async def upsert(self, project_id: str, catalog: FactorCatalog) -> None:
        validate_catalog(catalog)
        try:
            await self._write(project_id, catalog)
        except IntegrityError:
            # another writer inserted the row first; overwrite it
            await self.session.rollback()
            logger.debug("concurrent insert for project %s, retrying as update", project_id)
            await self._write(project_id, catalog)
        logger.info("saved pricing factors for project %s", project_id)

    async def _write(self, project_id: str, catalog: FactorCatalog) -> None:
        row = await self._get_row(project_id)
        if row is None:
            row = PricingFactorCatalog(project_id=project_id)
            self.session.add(row)

        for name in SCALAR_FIELDS:
            setattr(row, name, float(getattr(catalog, name)))
        # new dicts so the JSON columns are flagged dirty
        for name in MAP_FIELDS:
            setattr(row, name, {key: float(value) for key, value in getattr(catalog, name).items()})

        await self.session.commit()


@dataclass
class InMemoryFactorCatalogStore:
    """Dict-backed store for tests and single-process tools."""

    _catalogs: dict[str, FactorCatalog] = field(default_factory=dict)

    async def get(self, project_id: str) -> FactorCatalog:
        stored = self._catalogs.get(project_id)
        if stored is None:
            return default_catalog()
        return FactorCatalog(**stored.to_dict())

    async def exists(self, project_id: str) -> bool:
        return project_id in self._catalogs

    async def upsert(self, project_id: str, catalog: FactorCatalog) -> None:
        validate_catalog(catalog)
        self._catalogs[project_id] = FactorCatalog(**catalog.to_dict())

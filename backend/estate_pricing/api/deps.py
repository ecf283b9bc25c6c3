from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from estate_pricing.database import get_db
from estate_pricing.stores.catalog_store import FactorCatalogStore, SqlFactorCatalogStore

__all__ = ["get_db", "get_catalog_store"]


async def get_catalog_store(db: AsyncSession = Depends(get_db)) -> FactorCatalogStore:
    return SqlFactorCatalogStore(db)

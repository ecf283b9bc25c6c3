from fastapi import APIRouter

from estate_pricing.api.v1 import catalogs, health, pricing

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(pricing.router, prefix="/pricing", tags=["pricing"])
api_router.include_router(catalogs.router, prefix="/projects", tags=["catalogs"])

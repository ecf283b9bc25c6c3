from fastapi import APIRouter

from estate_pricing.config import settings

router = APIRouter()


@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "env": settings.app_env}

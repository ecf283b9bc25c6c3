import logging
import sys
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from estate_pricing.api.router import api_router
from estate_pricing.config import settings
from estate_pricing.database import engine, Base
from estate_pricing.models import factor_catalog  # noqa: F401  (registers the table)


def _setup_logging() -> None:
    """Log to stderr; only estate_pricing is verbose, SQL only on request."""
    level = settings.log_level or ("DEBUG" if settings.debug else "INFO")
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("estate_pricing").setLevel(level.upper())
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.sql_echo else logging.WARNING)


_setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # schema is created on startup, no migrations
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


app = FastAPI(
    title="Equivalent Pricing Engine",
    description="Turns unit attributes into a comparable equivalent price per area and reconciles it against marketing prices.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

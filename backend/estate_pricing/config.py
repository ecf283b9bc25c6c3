from pathlib import Path

from pydantic_settings import BaseSettings

# backend/.env wins over the repository-level .env
_backend_dir = Path(__file__).resolve().parent.parent
_env_file = next(
    (p for p in (_backend_dir / ".env", _backend_dir.parent / ".env") if p.exists()),
    ".env",
)


class Settings(BaseSettings):
    model_config = {"env_file": str(_env_file), "env_file_encoding": "utf-8"}

    app_env: str = "development"
    debug: bool = True
    # overrides the debug-derived level for the estate_pricing loggers
    log_level: str | None = None

    database_url: str = "sqlite+aiosqlite:///./pricing.db"
    sql_echo: bool = False

    # used when a quote request omits base_price_per_area
    default_base_price_per_area: int = 25_000

    cors_origins: list[str] = ["http://localhost:5173"]

    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()

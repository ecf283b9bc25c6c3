import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, String, func
from sqlalchemy.orm import Mapped, mapped_column

from estate_pricing.database import Base


class PricingFactorCatalog(Base):
    __tablename__ = "apartment_pricing_factors"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id: Mapped[str] = mapped_column(String(36), unique=True, index=True)

    # Scalar factors
    floor_factor: Mapped[float] = mapped_column(Float, default=1.0)
    parking_factor: Mapped[float] = mapped_column(Float, default=1.0)
    storage_factor: Mapped[float] = mapped_column(Float, default=1.0)
    balcony_garden_factor: Mapped[float] = mapped_column(Float, default=1.0)

    # Category maps (JSON)
    direction_factor: Mapped[dict] = mapped_column(JSON, default=dict)
    unit_type_factor: Mapped[dict] = mapped_column(JSON, default=dict)
    room_count_factor: Mapped[dict] = mapped_column(JSON, default=dict)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

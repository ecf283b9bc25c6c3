"""HTTP request bodies"""

from __future__ import annotations

from pydantic import BaseModel, Field

from estate_pricing.schemas.unit import ApartmentType, UnitAttributes


class UnitQuoteRequest(BaseModel):
    built_area: float = Field(description="Built area (m²)")
    apartment_type: ApartmentType = Field(default=ApartmentType.THREE_ROOM)
    garden_balcony_area: float = Field(default=0.0, ge=0, description="Garden/balcony area (m²)")
    total_area: float | None = Field(default=None, description="Total area; built + balcony when omitted")
    room_count: float | None = Field(default=None, gt=0, description="Rooms, half rooms allowed")
    direction: str | None = Field(default=None, description="Direction token or localized label")
    floor_number: int | None = None
    parking_spots: int = Field(default=0, ge=0)
    storage_rooms: int = Field(default=0, ge=0)
    marketing_price: float | None = Field(default=None, gt=0)
    linear_price: float | None = Field(default=None, gt=0)
    base_price_per_area: float | None = Field(default=None, gt=0, description="Defaults to the configured base price")

    def to_unit(self) -> UnitAttributes:
        return UnitAttributes(**self.model_dump(exclude={"base_price_per_area"}))


class ReconcileRequest(BaseModel):
    total_adjusted_price: float
    marketing_price: float = Field(gt=0)


class ListingSummaryRequest(BaseModel):
    total_area: float
    marketing_price: float | None = Field(default=None, gt=0)
    linear_price: float | None = Field(default=None, gt=0)
    discount_percent: float = Field(default=0.0, ge=0, le=100)


class FactorCatalogPayload(BaseModel):
    """Full catalog; every field required."""

    floor_factor: float
    parking_factor: float
    storage_factor: float
    balcony_garden_factor: float
    direction_factor: dict[str, float]
    unit_type_factor: dict[str, float]
    room_count_factor: dict[str, float]


class FactorCatalogPatch(BaseModel):
    """Partial catalog edit; map fields are merged key by key."""

    floor_factor: float | None = None
    parking_factor: float | None = None
    storage_factor: float | None = None
    balcony_garden_factor: float | None = None
    direction_factor: dict[str, float] | None = None
    unit_type_factor: dict[str, float] | None = None
    room_count_factor: dict[str, float] | None = None

# schemas/inventory.py
#
# Cabs and accessories share these shapes.

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from decimal import Decimal

from surplus_sales.core.config import settings


class InventoryCreate(BaseModel):
    name: str = Field(..., min_length=1)
    make: str = Field(..., min_length=1)
    quantity: int = Field(0, ge=0)

    price: Decimal = Field(
        0,
        ge=0,
        lt=10_000_000_000,
        description="Unit price, two decimal places",
    )

    unit_color: str = Field(..., min_length=1)
    image: str | None = None


class InventoryUpdate(BaseModel):
    name: str | None = None
    make: str | None = None
    quantity: int | None = Field(None, ge=0)
    price: Decimal | None = Field(None, ge=0, lt=10_000_000_000)
    unit_color: str | None = None
    image: str | None = None


class InventoryResponse(BaseModel):
    id: int
    name: str
    make: str
    quantity: int
    price: float
    status: str
    unit_color: str
    image: str | None = None
    created_at: datetime = Field(..., serialization_alias="createdAt")
    updated_at: datetime = Field(..., serialization_alias="updatedAt")

    @field_validator("image", mode="before")
    @classmethod
    def default_image(cls, value):
        return value or settings.DEFAULT_IMAGE_URL

    class Config:
        from_attributes = True

# schemas/material.py

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import List

from surplus_sales.core.config import settings


class MaterialCreate(BaseModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    supplier: str = Field(..., min_length=1)
    quantity: int = Field(0, ge=0)
    status: str = Field(..., min_length=1)
    image: str | None = None


class MaterialUpdate(BaseModel):
    name: str | None = None
    category: str | None = None
    supplier: str | None = None
    quantity: int | None = Field(None, ge=0)
    status: str | None = None
    image: str | None = None


class MaterialResponse(BaseModel):
    id: int
    name: str
    category: str
    supplier: str
    quantity: int
    status: str
    image: str | None = None
    created_at: datetime = Field(..., serialization_alias="createdAt")
    updated_at: datetime = Field(..., serialization_alias="updatedAt")

    @field_validator("image", mode="before")
    @classmethod
    def default_image(cls, value):
        return value or settings.DEFAULT_IMAGE_URL

    class Config:
        from_attributes = True


class MaterialPage(BaseModel):
    materials: List[MaterialResponse]
    total: int
    page: int
    limit: int
    total_pages: int = Field(..., serialization_alias="totalPages")

# schemas/customer.py

from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel
from datetime import datetime


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: str | None = Field(None, max_length=32)
    address: str | None = Field(None, max_length=255)


class CustomerUpdate(BaseModel):
    name: str | None = Field(None, min_length=2, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=32)
    address: str | None = Field(None, max_length=255)


class CustomerResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    date_registered: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

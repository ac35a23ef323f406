# schemas/sale.py

from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import date, datetime
from typing import List


class SaleUpdate(BaseModel):
    customer_id: str | None = Field(
        None, validation_alias=AliasChoices("customerId", "customer_id")
    )
    sold_by: str | None = Field(None, validation_alias=AliasChoices("soldBy", "sold_by"))
    sale_date: date | None = Field(
        None, validation_alias=AliasChoices("saleDate", "sale_date")
    )


class SaleResponse(BaseModel):
    id: str
    customer_id: str
    sold_by: str
    sale_date: date
    total_price: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class SaleItemResponse(BaseModel):
    id: str
    sale_id: str
    item_type: str
    multi_cab_id: int | None = None
    accessory_id: int | None = None
    quantity: int
    unit_price: float
    subtotal: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


# ===============================
# CAB SALE
# ===============================
class AccessoryLine(BaseModel):
    id: int
    quantity: int


class CabSaleRequest(BaseModel):
    # Range checks happen in the sale workflow so they report 400, not 422
    customer_id: str = Field(
        "",
        validation_alias=AliasChoices("customerID", "customerId", "customer_id"),
    )
    quantity: int = 0
    accessories: List[AccessoryLine] = []


class SoldAccessoryResponse(BaseModel):
    id: int
    name: str
    price: float
    quantity: int
    unit_price: float = Field(..., serialization_alias="unitPrice")
    subtotal: float


class CabSaleResponse(BaseModel):
    success: bool = True
    message: str = "Cab sold successfully"
    cab_id: int
    customer_id: str
    quantity: int
    accessories: List[SoldAccessoryResponse]
    total_price: float
    sale_date: date
    sale_id: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True

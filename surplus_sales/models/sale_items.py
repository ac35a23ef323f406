# models/sale_items.py

import uuid

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from surplus_sales.database import Base

ITEM_TYPE_CAB = "cab"
ITEM_TYPE_ACCESSORY = "accessory"


class SaleItem(Base):
    __tablename__ = "sale_items"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    sale_id = Column(
        String(36),
        ForeignKey("sales.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    item_type = Column(String(16), nullable=False)

    # Exactly one of these is set, matching item_type
    multi_cab_id = Column(Integer, nullable=True, index=True)
    accessory_id = Column(Integer, nullable=True, index=True)

    quantity = Column(Integer, nullable=False)

    # Price snapshot taken at sale time
    unit_price = Column(Numeric(12, 2), nullable=False)
    subtotal = Column(Numeric(12, 2), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    sale = relationship("Sale", back_populates="items")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_sale_items_quantity_positive"),
        CheckConstraint(
            "item_type IN ('cab', 'accessory')",
            name="ck_sale_items_item_type",
        ),
        CheckConstraint(
            "(item_type = 'cab' AND multi_cab_id IS NOT NULL AND accessory_id IS NULL)"
            " OR (item_type = 'accessory' AND accessory_id IS NOT NULL AND multi_cab_id IS NULL)",
            name="ck_sale_items_single_reference",
        ),
    )

# models/sales.py

import uuid

from sqlalchemy import Column, Date, DateTime, Index, Numeric, String
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from surplus_sales.database import Base


class Sale(Base):
    __tablename__ = "sales"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Not a foreign key: the sale workflow passes customer ids through unchecked
    customer_id = Column(String(36), nullable=False, index=True)
    sold_by = Column(String, nullable=False)

    sale_date = Column(Date, nullable=False, index=True)

    # Sum of the item subtotals at creation time
    total_price = Column(Numeric(12, 2), nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
    )


    __table_args__ = (
        Index("ix_sales_customer_created", "customer_id", "created_at"),
    )

# surplus_sales/models/accessories.py

from sqlalchemy import CheckConstraint, Column, DateTime, Index, Integer, Numeric, String
from sqlalchemy.sql import func

from surplus_sales.database import Base


class Accessory(Base):
    __tablename__ = "accessories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    make = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Numeric(12, 2), nullable=False, default=0)
    status = Column(String, nullable=False)
    unit_color = Column(String, nullable=False)
    image = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_accessories_created_at", "created_at"),
        CheckConstraint("price >= 0", name="ck_accessories_price_non_negative"),
    )

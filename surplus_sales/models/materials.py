# surplus_sales/models/materials.py

from sqlalchemy import Column, DateTime, Index, Integer, String
from sqlalchemy.sql import func

from surplus_sales.database import Base


class Material(Base):
    __tablename__ = "materials"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    supplier = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False)
    image = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_materials_category", "category"),
        Index("ix_materials_created_at", "created_at"),
    )

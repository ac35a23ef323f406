# surplus_sales/models/users.py

import uuid

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.sql import func

from surplus_sales.database import Base

ROLE_STAFF = "staff"
ROLE_ADMIN = "admin"

class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)

    # "staff" or "admin"
    role = Column(String(16), nullable=False, default=ROLE_STAFF)

    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

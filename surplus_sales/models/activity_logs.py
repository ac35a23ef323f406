# surplus_sales/models/activity_logs.py

import uuid

from sqlalchemy import Boolean, Column, DateTime, Index, String, Text
from sqlalchemy.sql import func

from surplus_sales.database import Base


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    timestamp = Column(DateTime, server_default=func.now(), nullable=False)
    user_id = Column(String, nullable=False)
    action_type = Column(String, nullable=False)
    details = Column(Text, nullable=True)
    status = Column(String(16), nullable=False)
    is_system_action = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_activity_logs_timestamp", "timestamp"),
    )

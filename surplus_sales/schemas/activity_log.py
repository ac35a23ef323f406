# schemas/activity_log.py

from pydantic import AliasChoices, BaseModel, Field
from datetime import datetime
from typing import List


class ActivityLogCreate(BaseModel):
    user: str = Field(..., min_length=1)
    action: str = Field(..., min_length=1)
    details: str | None = None
    status: str = Field(..., min_length=1)
    is_system_action: bool = Field(
        False, validation_alias=AliasChoices("isSystemAction", "is_system_action")
    )
    timestamp: datetime | None = None


class ActivityLogResponse(BaseModel):
    id: str
    timestamp: datetime
    user: str = Field(..., validation_alias="user_id")
    action: str = Field(..., validation_alias="action_type")
    details: str | None = None
    status: str
    is_system_action: bool = Field(..., serialization_alias="isSystemAction")
    created_at: datetime = Field(..., serialization_alias="createdAt")
    updated_at: datetime = Field(..., serialization_alias="updatedAt")

    class Config:
        from_attributes = True


class ActivityLogPage(BaseModel):
    data: List[ActivityLogResponse]
    total: int
    page: int
    last_page: int

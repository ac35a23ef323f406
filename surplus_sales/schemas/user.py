from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Literal


class UserCreate(BaseModel):
    full_name: str = Field(..., min_length=1, alias="fullName")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=8, max_length=72, description="Plain password (will be hashed). Minimum 8 characters.")
    role: Literal["staff", "admin"] | None = None

    class Config:
        populate_by_name = True


class UserUpdate(BaseModel):
    full_name: str | None = Field(None, alias="fullName")
    email: EmailStr | None = None
    role: Literal["staff", "admin"] | None = None

    class Config:
        populate_by_name = True


class PasswordUpdate(BaseModel):
    new_password: str = Field(..., min_length=8, max_length=72, alias="newPassword")

    class Config:
        populate_by_name = True


class UserResponse(BaseModel):
    id: str
    full_name: str
    email: EmailStr
    role: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    message: str
    user: UserResponse
    token: str
    token_type: str = "bearer"

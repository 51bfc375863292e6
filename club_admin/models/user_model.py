# /club_admin/models/user_model.py

"""
Contracts for staff accounts. The stored record (`UserRecord`) carries the
password; everything returned over the API uses `User`, which does not.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, description="Display name shown in the UI.")
    isAdmin: bool = Field(default=False)


class UserCreate(UserBase):
    password: str = Field(..., min_length=1)


class UserRecord(UserCreate):
    """The user exactly as the store keeps it."""
    id: int
    createdAt: datetime


class User(UserBase):
    """The public representation of a user. Never includes the password."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    createdAt: datetime


class LoginRequest(BaseModel):
    # Both optional so that a missing field gets the login-specific 400 message.
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    user: User

"""Pydantic schemas for users and login."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, pattern=r"^[a-zA-Z0-9]+$")
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserRead(BaseModel):
    """User data returned to clients (no password hash)."""
    username: str
    full_name: str
    email: str
    password_changed_at: datetime
    created_at: datetime

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, pattern=r"^[a-zA-Z0-9]+$")
    password: str = Field(..., min_length=6)


class LoginResponse(BaseModel):
    access_token: str
    access_token_expires_at: datetime
    token_type: str = "bearer"
    user: UserRead

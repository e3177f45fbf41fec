"""Authentication and profile schemas."""
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from unova.schemas.base import CamelModel


class TokenResponse(CamelModel):
    """Response containing JWT token after sign up / sign in."""
    token: str
    user_id: int
    username: str
    email: str


class SignUpRequest(CamelModel):
    """Sign up request body."""
    username: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: Optional[str] = None


class SignInRequest(CamelModel):
    """Sign in request body."""
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    """Public profile. The password hash is never serialized."""
    id: int
    username: str
    email: str
    name: Optional[str] = None
    google_id: Optional[str] = None
    created_at: datetime


class UserUpdate(CamelModel):
    """Profile fields a user may change."""
    username: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    name: Optional[str] = None

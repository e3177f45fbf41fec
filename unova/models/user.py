"""User model for SQLModel."""
from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional


class User(SQLModel, table=True):
    """User entity for authentication and document ownership."""
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password: str = Field(max_length=255)  # bcrypt hash, never the plain password
    name: Optional[str] = Field(default=None, max_length=255)
    google_id: Optional[str] = Field(default=None, unique=True, max_length=255)
    created_at: datetime = Field(default_factory=datetime.utcnow)

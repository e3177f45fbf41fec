"""Resolution model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Integer, ForeignKey, Text
from datetime import datetime
from typing import Optional


class Resolution(SQLModel, table=True):
    """A draft resolution."""
    __tablename__ = "resolutions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(
        sa_column=Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    )
    title: str
    content: str = Field(sa_column=Column(Text, nullable=False))
    committee: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

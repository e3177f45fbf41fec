"""Speech model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Integer, ForeignKey, Text
from datetime import datetime
from typing import Optional


class Speech(SQLModel, table=True):
    """A speech drafted by a delegate."""
    __tablename__ = "speeches"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(
        sa_column=Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    )
    title: str
    content: str = Field(sa_column=Column(Text, nullable=False))
    committee: Optional[str] = Field(default=None)
    type: Optional[str] = Field(default=None)  # opening, moderated caucus, closing...
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

"""Research note model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Integer, ForeignKey, JSON, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from datetime import datetime
from typing import List, Optional

# TEXT[] on PostgreSQL, JSON-encoded text everywhere else (SQLite)
TAGS_COLUMN_TYPE = JSON().with_variant(ARRAY(String), "postgresql")


class ResearchNote(SQLModel, table=True):
    """Country or topic research collected by a delegate."""
    __tablename__ = "research_notes"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(
        sa_column=Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    )
    title: str
    content: str = Field(sa_column=Column(Text, nullable=False))
    country: Optional[str] = Field(default=None)
    topic: Optional[str] = Field(default=None)
    tags: Optional[List[str]] = Field(default=None, sa_column=Column(TAGS_COLUMN_TYPE))
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

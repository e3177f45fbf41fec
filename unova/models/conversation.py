"""
Conversation Model for UNova AI Chat

Stores a chat session between a delegate and the assistant. Messages are not a
separate table: the whole transcript lives in one JSON column, in
chronological (append) order.
"""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional
from uuid import uuid4

from pydantic import BaseModel
from sqlalchemy import Column, ForeignKey, Integer, JSON
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel, Field


class MessageRole(str, Enum):
    """Message sender role"""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Message(BaseModel):
    """A single transcript entry embedded in a Conversation."""
    id: str
    role: MessageRole
    content: str
    timestamp: str  # ISO-8601

    @classmethod
    def new(cls, role: MessageRole, content: str) -> "Message":
        """Build a message with a fresh id stamped with the current time."""
        return cls(
            id=uuid4().hex,
            role=role,
            content=content,
            timestamp=datetime.utcnow().isoformat() + "Z",
        )


class MessageListType(TypeDecorator):
    """JSON column holding a list of Message, mapped to typed objects on load."""
    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: Optional[List[Any]], dialect):
        if value is None:
            return []
        return [
            m.model_dump(mode="json") if isinstance(m, Message) else Message.model_validate(m).model_dump(mode="json")
            for m in value
        ]

    def process_result_value(self, value: Optional[List[Any]], dialect):
        if not value:
            return []
        return [Message.model_validate(m) for m in value]


class Conversation(SQLModel, table=True):
    """
    Titled chat transcript owned by one user.

    The title is fixed at creation from the first user message; afterwards
    each chat turn appends one user and one assistant message.
    """
    __tablename__ = "conversations"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(
        sa_column=Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    )
    title: str
    messages: List[Message] = Field(default_factory=list, sa_column=Column(MessageListType, nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

"""Chat and conversation schemas."""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from unova.models.conversation import Message
from unova.schemas.base import CamelModel


class ChatRequest(CamelModel):
    """Chat request schema"""
    message: Optional[str] = Field(None, max_length=10000)
    assistance_type: Optional[str] = None
    conversation_id: Optional[int] = None


class ChatResponse(CamelModel):
    """Chat response schema"""
    conversation_id: int
    messages: List[Message]


class ConversationListItem(CamelModel):
    """Conversation list item schema"""
    id: int
    title: str
    created_at: datetime
    updated_at: datetime
    preview: str


class ConversationResponse(CamelModel):
    """Full conversation with transcript"""
    id: int
    user_id: int
    title: str
    messages: List[Message]
    created_at: datetime
    updated_at: datetime


class ConversationUpdate(CamelModel):
    """Rename request"""
    title: str = Field(..., min_length=1, max_length=200)

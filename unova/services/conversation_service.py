"""
Conversation Service

CRUD operations for conversations. The message sequence is stored on the
conversation row itself, so a chat turn is a single insert or update.
"""

from datetime import datetime
from typing import List, Optional

from unova.models.conversation import Conversation, Message
from unova.services.base_service import RecordService

TITLE_MAX_LENGTH = 50
PREVIEW_MAX_LENGTH = 100


def derive_title(message_text: str) -> str:
    """First 50 characters of the opening message, with '...' when cut."""
    if len(message_text) > TITLE_MAX_LENGTH:
        return message_text[:TITLE_MAX_LENGTH] + "..."
    return message_text


def conversation_preview(messages: List[Message]) -> str:
    """Second-to-last message, truncated; empty for fewer than two messages."""
    if len(messages) < 2:
        return ""
    return messages[-2].content[:PREVIEW_MAX_LENGTH]


class ConversationService(RecordService[Conversation]):
    """Service for managing conversations and their transcripts"""
    model = Conversation
    label = "Conversation"

    def create_conversation(self, user_id: int, title: str, messages: List[Message]) -> Conversation:
        """Create new conversation with an initial transcript"""
        return self.create({"user_id": user_id, "title": title, "messages": list(messages)})

    def update_messages(self, conversation_id: int, messages: List[Message]) -> Optional[Conversation]:
        """Replace the stored transcript and bump updated_at"""
        return self.update(conversation_id, {"messages": list(messages)})

    def rename(self, conversation_id: int, user_id: int, title: str) -> Conversation:
        """Change a conversation title after an ownership check"""
        self.get_owned(conversation_id, user_id)
        return self.update(conversation_id, {"title": title})

    def delete_owned(self, conversation_id: int, user_id: int) -> bool:
        self.get_owned(conversation_id, user_id)
        return self.delete(conversation_id)

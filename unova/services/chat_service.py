"""
Chat Service

Runs one chat turn: record the user's message, ask the completion client for
a reply, and persist the updated transcript.

If generation fails nothing is written, in either branch. A new conversation
is never created, and an existing one keeps its pre-turn transcript. The
client can simply resend the message.

Two turns racing on the same conversation are not serialized: each reads the
transcript, appends its pair and writes the whole sequence back, so the later
write wins.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from unova.errors import NotFoundError, ValidationError
from unova.models.conversation import Message, MessageRole
from unova.services.completion_client import CompletionClient
from unova.services.conversation_service import ConversationService, derive_title

logger = logging.getLogger(__name__)

GREETING_SYSTEM_MESSAGE = "You are UNova, a helpful assistant for Model UN delegates."


@dataclass
class ChatTurnResult:
    """Outcome of a chat turn"""
    conversation_id: int
    messages: List[Message]


class ChatService:
    """Orchestrates a chat turn across persistence and the completion client"""

    def __init__(self, conversations: ConversationService, completion_client: CompletionClient):
        self.conversations = conversations
        self.completion_client = completion_client

    async def handle_chat_turn(
        self,
        user_id: int,
        message_text: Optional[str],
        assistance_type: Optional[str] = None,
        conversation_id: Optional[int] = None,
    ) -> ChatTurnResult:
        """
        Process one user message.

        Args:
            user_id: Authenticated caller
            message_text: The user's message
            assistance_type: Assistance type tag, passed through to the completion client
            conversation_id: Existing conversation to continue, or None to start one

        Returns:
            ChatTurnResult with the conversation id and full transcript

        Raises:
            ValidationError: If the message is empty
            NotFoundError: If conversation_id is missing or owned by someone else
            UpstreamError, ConfigurationError: From the completion client
        """
        if not message_text:
            raise ValidationError("Message is required")

        logger.info(f"Chat turn from user {user_id}: {message_text[:50]}...")
        user_message = Message.new(MessageRole.USER, message_text)

        if conversation_id is not None:
            conversation = self.conversations.get_owned(conversation_id, user_id)
            # Release the pooled connection before awaiting; loaded rows stay usable
            self.conversations.session.commit()
            messages = [*conversation.messages, user_message]
            title = None
        else:
            conversation = None
            messages = [Message.new(MessageRole.SYSTEM, GREETING_SYSTEM_MESSAGE), user_message]
            title = derive_title(message_text)

        # Only suspension point; nothing has been written yet
        reply_text = await self.completion_client.generate_reply(messages, assistance_type)

        messages.append(Message.new(MessageRole.ASSISTANT, reply_text))

        if conversation is None:
            conversation = self.conversations.create_conversation(user_id, title, messages)
            logger.info(f"Created conversation {conversation.id} for user {user_id}")
        else:
            updated = self.conversations.update_messages(conversation.id, messages)
            if updated is None:
                # Deleted while the reply was being generated
                raise NotFoundError("Conversation not found")
            conversation = updated

        return ChatTurnResult(conversation_id=conversation.id, messages=list(conversation.messages))

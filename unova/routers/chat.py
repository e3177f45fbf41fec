"""
Chat API Router

Chat turns plus the conversation history endpoints. Every route requires a
bearer token and only ever exposes the caller's own conversations.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from unova.db import get_session
from unova.middleware.auth import CurrentUser, get_current_user
from unova.schemas.base import MessageResponse
from unova.schemas.chat import (
    ChatRequest,
    ChatResponse,
    ConversationListItem,
    ConversationResponse,
    ConversationUpdate,
)
from unova.services.chat_service import ChatService
from unova.services.completion_client import CompletionClient
from unova.services.conversation_service import ConversationService, conversation_preview

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])  # /api prefix added in main.py


def get_conversation_service(session: Session = Depends(get_session)) -> ConversationService:
    """Dependency for getting ConversationService instance."""
    return ConversationService(session)


def get_completion_client(request: Request) -> CompletionClient:
    """Dependency returning the shared completion client created at startup."""
    return request.app.state.completion_client


def get_chat_service(
    conversations: ConversationService = Depends(get_conversation_service),
    completion_client: CompletionClient = Depends(get_completion_client),
) -> ChatService:
    return ChatService(conversations, completion_client)


@router.post("/chat", response_model=ChatResponse)
async def chat(
    body: ChatRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: ChatService = Depends(get_chat_service),
):
    """
    Run one chat turn.

    Starts a new conversation when ``conversationId`` is absent, otherwise
    continues the caller's existing conversation.
    """
    result = await service.handle_chat_turn(
        user_id=current_user.user_id,
        message_text=body.message,
        assistance_type=body.assistance_type,
        conversation_id=body.conversation_id,
    )
    return ChatResponse(conversation_id=result.conversation_id, messages=result.messages)


@router.get("/conversations", response_model=List[ConversationListItem])
async def list_conversations(
    current_user: CurrentUser = Depends(get_current_user),
    service: ConversationService = Depends(get_conversation_service),
):
    """Conversation summaries, newest first, each with a short preview."""
    return [
        ConversationListItem(
            id=conv.id,
            title=conv.title,
            created_at=conv.created_at,
            updated_at=conv.updated_at,
            preview=conversation_preview(conv.messages),
        )
        for conv in service.list_by_user(current_user.user_id)
    ]


@router.get("/conversations/{conversation_id}", response_model=ConversationResponse)
async def get_conversation(
    conversation_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: ConversationService = Depends(get_conversation_service),
):
    return service.get_owned(conversation_id, current_user.user_id)


@router.patch("/conversations/{conversation_id}", response_model=ConversationResponse)
async def rename_conversation(
    conversation_id: int,
    body: ConversationUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: ConversationService = Depends(get_conversation_service),
):
    return service.rename(conversation_id, current_user.user_id, body.title)


@router.delete("/conversations/{conversation_id}", response_model=MessageResponse)
async def delete_conversation(
    conversation_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: ConversationService = Depends(get_conversation_service),
):
    service.delete_owned(conversation_id, current_user.user_id)
    logger.info(f"User {current_user.user_id} deleted conversation {conversation_id}")
    return MessageResponse(message="Conversation deleted successfully")

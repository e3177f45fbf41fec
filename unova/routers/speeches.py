"""Speech routes."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from unova.db import get_session
from unova.middleware.auth import CurrentUser, get_current_user
from unova.schemas.base import MessageResponse
from unova.schemas.document import SpeechCreate, SpeechResponse, SpeechUpdate
from unova.services.document_service import SpeechService

router = APIRouter(tags=["Speeches"])  # /api prefix added in main.py


def get_speech_service(session: Session = Depends(get_session)) -> SpeechService:
    """Dependency for getting SpeechService instance."""
    return SpeechService(session)


@router.get("/speeches", response_model=List[SpeechResponse])
async def list_speeches(
    current_user: CurrentUser = Depends(get_current_user),
    service: SpeechService = Depends(get_speech_service),
):
    """List the user's speeches, newest first."""
    return service.list_by_user(current_user.user_id)


@router.post("/speeches", response_model=SpeechResponse, status_code=status.HTTP_201_CREATED)
async def create_speech(
    body: SpeechCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: SpeechService = Depends(get_speech_service),
):
    return service.create_for_user(current_user.user_id, body.model_dump())


@router.get("/speeches/{speech_id}", response_model=SpeechResponse)
async def get_speech(
    speech_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: SpeechService = Depends(get_speech_service),
):
    return service.get_owned(speech_id, current_user.user_id)


@router.patch("/speeches/{speech_id}", response_model=SpeechResponse)
async def update_speech(
    speech_id: int,
    body: SpeechUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: SpeechService = Depends(get_speech_service),
):
    """Partially update a speech; only fields present in the body change."""
    return service.update_owned(speech_id, current_user.user_id, body.model_dump(exclude_unset=True))


@router.delete("/speeches/{speech_id}", response_model=MessageResponse)
async def delete_speech(
    speech_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: SpeechService = Depends(get_speech_service),
):
    service.delete_owned(speech_id, current_user.user_id)
    return MessageResponse(message="Speech deleted successfully")

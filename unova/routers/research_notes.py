"""Research note routes."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from unova.db import get_session
from unova.middleware.auth import CurrentUser, get_current_user
from unova.schemas.base import MessageResponse
from unova.schemas.document import ResearchNoteCreate, ResearchNoteResponse, ResearchNoteUpdate
from unova.services.document_service import ResearchNoteService

router = APIRouter(tags=["Research Notes"])  # /api prefix added in main.py


def get_research_note_service(session: Session = Depends(get_session)) -> ResearchNoteService:
    """Dependency for getting ResearchNoteService instance."""
    return ResearchNoteService(session)


@router.get("/research-notes", response_model=List[ResearchNoteResponse])
async def list_research_notes(
    current_user: CurrentUser = Depends(get_current_user),
    service: ResearchNoteService = Depends(get_research_note_service),
):
    """List the user's research notes, newest first."""
    return service.list_by_user(current_user.user_id)


@router.post("/research-notes", response_model=ResearchNoteResponse, status_code=status.HTTP_201_CREATED)
async def create_research_note(
    body: ResearchNoteCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: ResearchNoteService = Depends(get_research_note_service),
):
    fields = body.model_dump()
    fields["tags"] = fields.get("tags") or []
    return service.create_for_user(current_user.user_id, fields)


@router.get("/research-notes/{note_id}", response_model=ResearchNoteResponse)
async def get_research_note(
    note_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: ResearchNoteService = Depends(get_research_note_service),
):
    return service.get_owned(note_id, current_user.user_id)


@router.patch("/research-notes/{note_id}", response_model=ResearchNoteResponse)
async def update_research_note(
    note_id: int,
    body: ResearchNoteUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: ResearchNoteService = Depends(get_research_note_service),
):
    """Partially update a note. Sending ``tags`` replaces the whole list."""
    return service.update_owned(note_id, current_user.user_id, body.model_dump(exclude_unset=True))


@router.delete("/research-notes/{note_id}", response_model=MessageResponse)
async def delete_research_note(
    note_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: ResearchNoteService = Depends(get_research_note_service),
):
    service.delete_owned(note_id, current_user.user_id)
    return MessageResponse(message="Research note deleted successfully")

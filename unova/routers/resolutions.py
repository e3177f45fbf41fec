"""Resolution routes."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from unova.db import get_session
from unova.middleware.auth import CurrentUser, get_current_user
from unova.schemas.base import MessageResponse
from unova.schemas.document import ResolutionCreate, ResolutionResponse, ResolutionUpdate
from unova.services.document_service import ResolutionService

router = APIRouter(tags=["Resolutions"])  # /api prefix added in main.py


def get_resolution_service(session: Session = Depends(get_session)) -> ResolutionService:
    """Dependency for getting ResolutionService instance."""
    return ResolutionService(session)


@router.get("/resolutions", response_model=List[ResolutionResponse])
async def list_resolutions(
    current_user: CurrentUser = Depends(get_current_user),
    service: ResolutionService = Depends(get_resolution_service),
):
    """List the user's draft resolutions, newest first."""
    return service.list_by_user(current_user.user_id)


@router.post("/resolutions", response_model=ResolutionResponse, status_code=status.HTTP_201_CREATED)
async def create_resolution(
    body: ResolutionCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: ResolutionService = Depends(get_resolution_service),
):
    return service.create_for_user(current_user.user_id, body.model_dump())


@router.get("/resolutions/{resolution_id}", response_model=ResolutionResponse)
async def get_resolution(
    resolution_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: ResolutionService = Depends(get_resolution_service),
):
    return service.get_owned(resolution_id, current_user.user_id)


@router.patch("/resolutions/{resolution_id}", response_model=ResolutionResponse)
async def update_resolution(
    resolution_id: int,
    body: ResolutionUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: ResolutionService = Depends(get_resolution_service),
):
    return service.update_owned(resolution_id, current_user.user_id, body.model_dump(exclude_unset=True))


@router.delete("/resolutions/{resolution_id}", response_model=MessageResponse)
async def delete_resolution(
    resolution_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: ResolutionService = Depends(get_resolution_service),
):
    service.delete_owned(resolution_id, current_user.user_id)
    return MessageResponse(message="Resolution deleted successfully")

"""Schemas for speeches, resolutions and research notes."""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from unova.schemas.base import CamelModel


# Title and content are optional here so a missing value is reported as a
# 400 with a readable message by the service layer.

class SpeechCreate(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None
    committee: Optional[str] = None
    type: Optional[str] = None


class SpeechUpdate(SpeechCreate):
    pass


class SpeechResponse(CamelModel):
    id: int
    user_id: int
    title: str
    content: str
    committee: Optional[str] = None
    type: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ResolutionCreate(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None
    committee: Optional[str] = None


class ResolutionUpdate(ResolutionCreate):
    pass


class ResolutionResponse(CamelModel):
    id: int
    user_id: int
    title: str
    content: str
    committee: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ResearchNoteCreate(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None
    country: Optional[str] = None
    topic: Optional[str] = None
    tags: Optional[List[str]] = Field(None, max_length=50)


class ResearchNoteUpdate(ResearchNoteCreate):
    pass


class ResearchNoteResponse(CamelModel):
    id: int
    user_id: int
    title: str
    content: str
    country: Optional[str] = None
    topic: Optional[str] = None
    tags: Optional[List[str]] = None
    created_at: datetime
    updated_at: datetime

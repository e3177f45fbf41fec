"""Services for the delegate's saved documents: speeches, resolutions, research notes."""
from typing import Any, Dict

from unova.errors import ValidationError
from unova.models.research_note import ResearchNote
from unova.models.resolution import Resolution
from unova.models.speech import Speech
from unova.services.base_service import RecordService


class DocumentService(RecordService):
    """Record service for titled documents with a body."""

    def create_for_user(self, user_id: int, fields: Dict[str, Any]) -> Any:
        """Validate required fields and create a document owned by ``user_id``."""
        if not fields.get("title") or not fields.get("content"):
            raise ValidationError("Title and content are required")
        return self.create({**fields, "user_id": user_id})

    def update_owned(self, record_id: int, user_id: int, fields: Dict[str, Any]) -> Any:
        """Partial update after an ownership check."""
        self.get_owned(record_id, user_id)
        for required in ("title", "content"):
            if required in fields and not fields[required]:
                raise ValidationError(f"{required.capitalize()} cannot be empty")
        return self.update(record_id, fields)

    def delete_owned(self, record_id: int, user_id: int) -> bool:
        self.get_owned(record_id, user_id)
        return self.delete(record_id)


class SpeechService(DocumentService):
    model = Speech
    label = "Speech"
    optional_fields = ("committee", "type")


class ResolutionService(DocumentService):
    model = Resolution
    label = "Resolution"
    optional_fields = ("committee",)


class ResearchNoteService(DocumentService):
    model = ResearchNote
    label = "Research note"
    optional_fields = ("country", "topic", "tags")

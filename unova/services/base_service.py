"""
Base record service

Single-row CRUD shared by every user-owned record kind (speech, resolution,
research note, conversation). Each operation is one statement followed by a
commit; nothing here spans more than one row.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlmodel import Session, SQLModel, select

from unova.errors import NotFoundError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=SQLModel)


class RecordService(Generic[RecordT]):
    """CRUD over one user-owned table."""

    model: Type[RecordT]
    label: str = "Record"
    # Optional columns that must be stored as explicit NULL when omitted
    optional_fields: tuple = ()
    # Columns a partial update may never touch
    protected_fields: tuple = ("id", "user_id", "created_at", "updated_at")

    def __init__(self, session: Session):
        self.session = session

    def get(self, record_id: int) -> Optional[RecordT]:
        """Get a record by primary key, always re-read from the database."""
        return self.session.get(self.model, record_id, populate_existing=True)

    def list_by_user(self, user_id: int) -> List[RecordT]:
        """All records owned by a user, newest first."""
        statement = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
        )
        return list(self.session.exec(statement).all())

    def create(self, fields: Dict[str, Any]) -> RecordT:
        """Insert a new record; id and timestamps are assigned here."""
        data = {name: fields.get(name) for name in self.optional_fields}
        data.update({k: v for k, v in fields.items() if k not in ("id", "created_at", "updated_at")})
        now = datetime.utcnow()
        record = self.model(**data, created_at=now, updated_at=now)

        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def update(self, record_id: int, fields: Dict[str, Any]) -> Optional[RecordT]:
        """Apply a partial update and stamp updated_at. None if no row matched."""
        record = self.get(record_id)
        if not record:
            return None

        for name, value in fields.items():
            if name in self.protected_fields:
                continue
            setattr(record, name, value)
        record.updated_at = datetime.utcnow()

        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def delete(self, record_id: int) -> bool:
        """Delete a record. True iff a row was removed."""
        record = self.get(record_id)
        if not record:
            return False

        self.session.delete(record)
        self.session.commit()
        return True

    def get_owned(self, record_id: int, user_id: int) -> RecordT:
        """
        Load a record and verify the caller owns it.

        Raises:
            NotFoundError: if the row is missing or belongs to another user
                (both cases are reported identically)
        """
        record = self.get(record_id)
        if not record or record.user_id != user_id:
            if record:
                logger.warning(
                    f"Ownership check failed: user {user_id} requested {self.label.lower()} {record_id}"
                )
            raise NotFoundError(f"{self.label} not found")
        return record

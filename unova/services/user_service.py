"""User service: account lookups, creation and profile updates."""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

import bcrypt
from sqlmodel import Session, select

from unova.models.user import User

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class UserService:
    """Service class for user accounts."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        statement = select(User).where(User.username == username)
        return self.session.exec(statement).first()

    def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def get_by_google_id(self, google_id: str) -> Optional[User]:
        statement = select(User).where(User.google_id == google_id)
        return self.session.exec(statement).first()

    def create(self, fields: Dict[str, Any]) -> User:
        """Create a user. ``fields['password']`` must already be hashed."""
        user = User(
            username=fields["username"],
            email=fields["email"],
            password=fields["password"],
            # Nullable fields are stored as explicit NULL
            name=fields.get("name"),
            google_id=fields.get("google_id"),
            created_at=datetime.utcnow(),
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.info(f"Created user {user.id} ({user.username})")
        return user

    def update(self, user_id: int, fields: Dict[str, Any]) -> Optional[User]:
        """Partial profile update. None if the user does not exist."""
        user = self.get(user_id)
        if not user:
            return None

        for name, value in fields.items():
            if name in ("id", "created_at"):
                continue
            setattr(user, name, value)

        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

"""JWT authentication for FastAPI."""
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Request
from jose import jwt, JWTError, ExpiredSignatureError
from pydantic import BaseModel

from unova.config import Settings
from unova.errors import AuthenticationError

ALGORITHM = "HS256"


class CurrentUser(BaseModel):
    """User information extracted from JWT."""
    user_id: int
    email: Optional[str] = None


def create_access_token(user_id: int, email: str, settings: Settings) -> str:
    """Issue a signed token for a user."""
    expire = datetime.utcnow() + timedelta(days=settings.token_expire_days)
    payload = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
        "iat": datetime.utcnow(),
    }
    return jwt.encode(payload, settings.auth_secret, algorithm=ALGORITHM)


async def get_current_user(request: Request) -> CurrentUser:
    """
    Validate JWT token from Authorization header and extract user information.

    Args:
        request: FastAPI request object to extract Authorization header

    Returns:
        CurrentUser with user_id and email from token

    Raises:
        AuthenticationError: If the header is missing or the token is invalid or expired
    """
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise AuthenticationError()

    token = auth_header[7:]  # Remove "Bearer " prefix
    settings: Settings = request.app.state.settings

    try:
        payload = jwt.decode(token, settings.auth_secret, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except JWTError:
        raise AuthenticationError("Invalid token")

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid token: missing user ID")

    return CurrentUser(user_id=user_id, email=payload.get("email"))

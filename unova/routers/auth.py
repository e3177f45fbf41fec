"""Authentication and profile routes."""
import logging

from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session

from unova.db import get_session
from unova.errors import AuthenticationError, NotFoundError, ValidationError
from unova.middleware.auth import CurrentUser, create_access_token, get_current_user
from unova.schemas.auth import SignInRequest, SignUpRequest, TokenResponse, UserResponse, UserUpdate
from unova.services.user_service import UserService, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])  # /auth prefix added in main.py
profile_router = APIRouter(tags=["Profile"])  # /api prefix added in main.py


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    """Dependency for getting UserService instance."""
    return UserService(session)


def _token_response(request: Request, user) -> TokenResponse:
    token = create_access_token(user.id, user.email, request.app.state.settings)
    return TokenResponse(token=token, user_id=user.id, username=user.username, email=user.email)


@router.post("/sign-up", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    body: SignUpRequest,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    """Register a new account and sign it in."""
    if service.get_by_username(body.username):
        raise ValidationError("Username already exists")
    if service.get_by_email(body.email):
        raise ValidationError("User with this email already exists")

    user = service.create({
        "username": body.username,
        "email": body.email,
        "password": hash_password(body.password),
        "name": body.name,
    })
    return _token_response(request, user)


@router.post("/sign-in", response_model=TokenResponse)
async def sign_in(
    body: SignInRequest,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    user = service.get_by_email(body.email)
    if not user or not verify_password(body.password, user.password):
        raise AuthenticationError("Invalid email or password")
    return _token_response(request, user)


@profile_router.get("/user", response_model=UserResponse)
async def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """Return the signed-in user's profile."""
    user = service.get(current_user.user_id)
    if not user:
        # Token outlived the account
        raise AuthenticationError()
    return user


@profile_router.patch("/user", response_model=UserResponse)
async def update_profile(
    body: UserUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """Update name, email or username."""
    # Only name may be cleared; username and email are NOT NULL
    fields = {
        k: v for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k == "name"
    }

    if fields.get("username"):
        existing = service.get_by_username(fields["username"])
        if existing and existing.id != current_user.user_id:
            raise ValidationError("Username already exists")
    if fields.get("email"):
        existing = service.get_by_email(fields["email"])
        if existing and existing.id != current_user.user_id:
            raise ValidationError("User with this email already exists")

    user = service.update(current_user.user_id, fields)
    if not user:
        raise NotFoundError("User not found")
    return user

"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError

from recipebox.api.dependencies import (
    CurrentAccount,
    get_current_account,
    get_session_service,
    get_user_service,
    session_cookie,
)
from recipebox.config import get_settings
from recipebox.errors import (
    AppError,
    ConstraintViolation,
    EmailAlreadyExists,
    InvalidCredentials,
    NotFoundOrNotOwned,
)
from recipebox.models.user import User
from recipebox.schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from recipebox.services.auth import create_session_token, decode_session_token
from recipebox.services.session_service import SessionService
from recipebox.services.user_service import UserService

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(prefix="/api/auth", tags=["auth"])


def start_session(response: Response, sessions: SessionService, user: User) -> None:
    """Create a server-side session and hand its signed id to the client."""
    session_id = sessions.create(user)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=create_session_token(session_id),
        max_age=settings.session_ttl_minutes * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


@router.post("/register", response_model=AuthResponse)
async def register(
    user_data: UserRegister,
    response: Response,
    users: Annotated[UserService, Depends(get_user_service)],
    sessions: Annotated[SessionService, Depends(get_session_service)],
):
    """Register a new user and log them in."""
    if users.find_by_email(user_data.email):
        raise EmailAlreadyExists()

    try:
        user_id = users.create(user_data.name, user_data.email, user_data.password)
    except ConstraintViolation:
        raise EmailAlreadyExists() from None

    user = users.find_by_id(user_id)
    start_session(response, sessions, user)
    logger.info(f"New user registered: {user.email} (ID: {user.id})")

    return AuthResponse(
        message="Account created successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    response: Response,
    users: Annotated[UserService, Depends(get_user_service)],
    sessions: Annotated[SessionService, Depends(get_session_service)],
):
    """Login with email and password."""
    user = users.authenticate(credentials.email, credentials.password)
    if not user:
        raise InvalidCredentials()

    users.touch_activity(user.id)
    start_session(response, sessions, user)
    logger.info(f"User logged in: {user.email} (ID: {user.id})")

    return AuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    token: Annotated[str | None, Depends(session_cookie)],
    sessions: Annotated[SessionService, Depends(get_session_service)],
):
    """Destroy the current session, if any."""
    session_id = decode_session_token(token) if token else None
    if session_id:
        try:
            sessions.destroy(session_id)
        except SQLAlchemyError:
            logger.exception("Logout failed")
            raise AppError(
                "An error occurred during logout", error="Logout failed"
            ) from None
        logger.info("User logged out")

    response.delete_cookie(
        settings.session_cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return MessageResponse(message="Logout successful")


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(
    current_account: Annotated[CurrentAccount, Depends(get_current_account)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get current user information."""
    user = users.find_by_id(current_account.id)
    if user is None:
        raise NotFoundOrNotOwned("Session user no longer exists", error="User not found")
    return CurrentUserResponse(user=UserResponse.model_validate(user))

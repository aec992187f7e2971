"""FastAPI dependencies for authentication and database."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session

from recipebox.config import get_settings
from recipebox.database import get_db
from recipebox.errors import AuthenticationRequired
from recipebox.services.auth import decode_session_token
from recipebox.services.favorite_service import FavoriteService
from recipebox.services.recipe_service import RecipeService
from recipebox.services.session_service import SessionService
from recipebox.services.user_service import UserService

settings = get_settings()

session_cookie = APIKeyCookie(name=settings.session_cookie_name, auto_error=False)


@dataclass(frozen=True)
class CurrentAccount:
    """Identity bound to the request's session."""

    id: int
    name: str
    email: str


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_recipe_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecipeService:
    """Get recipe service with dependencies."""
    return RecipeService(db)


def get_favorite_service(
    db: Annotated[Session, Depends(get_db)],
) -> FavoriteService:
    """Get favorite service with dependencies."""
    return FavoriteService(db)


def get_session_service(
    db: Annotated[Session, Depends(get_db)],
) -> SessionService:
    """Get session service with dependencies."""
    return SessionService(db)


def get_current_account(
    token: Annotated[str | None, Depends(session_cookie)],
    sessions: Annotated[SessionService, Depends(get_session_service)],
) -> CurrentAccount:
    """Resolve the session cookie to an account or reject the request."""
    if not token:
        raise AuthenticationRequired()

    session_id = decode_session_token(token)
    if session_id is None:
        raise AuthenticationRequired()

    user_session = sessions.get(session_id)
    if user_session is None:
        raise AuthenticationRequired()

    return CurrentAccount(id=user_session.user_id, name=user_session.name, email=user_session.email)

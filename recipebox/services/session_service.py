"""Server-side login sessions."""

import logging
import secrets
from datetime import timedelta

from sqlalchemy.orm import Session

from recipebox.config import get_settings
from recipebox.models.mixins import utcnow
from recipebox.models.session import UserSession
from recipebox.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()


class SessionService:
    """Create, resolve and destroy login sessions."""

    def __init__(self, db: Session, ttl_minutes: int | None = None):
        self.db = db
        self.ttl = timedelta(minutes=ttl_minutes or settings.session_ttl_minutes)

    def create(self, user: User) -> str:
        """Start a session for the user and return its id."""
        session_id = secrets.token_urlsafe(32)
        self.db.add(
            UserSession(
                id=session_id,
                user_id=user.id,
                name=user.name,
                email=user.email,
                expires_at=utcnow() + self.ttl,
            )
        )
        self.db.commit()
        return session_id

    def get(self, session_id: str) -> UserSession | None:
        """Return the live session, or None if it is unknown or expired."""
        now = utcnow()
        user_session = (
            self.db.query(UserSession)
            .filter(UserSession.id == session_id, UserSession.expires_at > now)
            .first()
        )
        if user_session is None:
            self.db.query(UserSession).filter(
                UserSession.id == session_id, UserSession.expires_at <= now
            ).delete(synchronize_session=False)
            self.db.commit()
        return user_session

    def destroy(self, session_id: str) -> bool:
        deleted = (
            self.db.query(UserSession)
            .filter(UserSession.id == session_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0

    def purge_expired(self) -> int:
        """Delete every expired session and return how many were removed."""
        purged = (
            self.db.query(UserSession)
            .filter(UserSession.expires_at <= utcnow())
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if purged:
            logger.info(f"Purged {purged} expired sessions")
        return purged

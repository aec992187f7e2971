"""Server-side login session model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from recipebox.database import Base
from recipebox.models.mixins import utcnow


class UserSession(Base):
    """Binds a random session token to the account that logged in."""

    __tablename__ = "sessions"

    id = Column(String(64), primary_key=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

"""User account access."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from recipebox.errors import ConstraintViolation
from recipebox.models.mixins import utcnow
from recipebox.models.user import User
from recipebox.schemas.auth import normalize_email
from recipebox.services.auth import dummy_verify_password, get_password_hash
from recipebox.services.auth import verify_password as check_password_hash

logger = logging.getLogger(__name__)


class UserService:
    """Create, look up and authenticate user accounts."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, name: str, email: str, password: str) -> int:
        """Create an account and return its id.

        Raises ConstraintViolation when the email is already registered.
        """
        user = User(
            name=name,
            email=normalize_email(email),
            password_hash=get_password_hash(password),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConstraintViolation("Email already registered") from None
        self.db.refresh(user)
        return user.id

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def verify_password(self, user: User, password: str) -> bool:
        return check_password_hash(password, user.password_hash)

    def authenticate(self, email: str, password: str) -> User | None:
        """Return the user for a matching email and password, else None."""
        user = self.find_by_email(email)
        if not user:
            # Unknown emails take as long as wrong passwords
            dummy_verify_password()
            return None
        if not self.verify_password(user, password):
            return None
        return user

    def touch_activity(self, user_id: int) -> bool:
        """Refresh the user's updated_at. Failures are logged, not raised."""
        try:
            updated = (
                self.db.query(User)
                .filter(User.id == user_id)
                .update({User.updated_at: utcnow()}, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.warning(f"Failed to refresh activity for user {user_id}", exc_info=True)
            return False
        return updated > 0

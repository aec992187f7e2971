"""Password hashing and session cookie signing."""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from recipebox.config import get_settings

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.password_hash_rounds
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def dummy_verify_password() -> None:
    """Spend one verification's worth of time when there is no hash to check."""
    pwd_context.dummy_verify()


def create_session_token(session_id: str) -> str:
    """Sign a session id for the session cookie."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.session_ttl_minutes)
    to_encode = {
        "sid": session_id,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.session_secret, algorithm=settings.session_algorithm)


def decode_session_token(token: str) -> str | None:
    """Return the session id from a signed cookie, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )
    except JWTError:
        return None
    session_id = payload.get("sid")
    return session_id if isinstance(session_id, str) else None

"""Authentication schemas."""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 4


def normalize_email(email: str) -> str:
    return email.strip().lower()


def check_email_address(value: str | None) -> str:
    """Normalize an email, rejecting anything that is not an address."""
    value = (value or "").strip()
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("Valid email is required") from None
    return normalize_email(value)


class UserRegister(BaseModel):
    """User registration request."""

    name: str | None = Field(None, validate_default=True)
    email: str | None = Field(None, validate_default=True)
    password: str | None = Field(None, validate_default=True)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str | None) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("Name is required")
        if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
            raise ValueError("Name must be between 2 and 100 characters")
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str:
        return check_email_address(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str | None) -> str:
        if value is None or len(value) < PASSWORD_MIN_LENGTH:
            raise ValueError("Password must be at least 4 characters")
        return value


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = Field(None, validate_default=True)
    password: str | None = Field(None, validate_default=True)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str:
        return check_email_address(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str | None) -> str:
        if not value:
            raise ValueError("Password is required")
        return value


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class AuthResponse(BaseModel):
    """Response to a successful register or login."""

    success: bool = True
    message: str
    user: UserResponse


class CurrentUserResponse(BaseModel):
    """Response for the session introspection endpoint."""

    success: bool = True
    user: UserResponse


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    success: bool = True
    message: str

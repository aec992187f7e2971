"""Application error types.

Every error that crosses the HTTP boundary is an ``AppError`` with a status
code, a short ``error`` code and a human-readable ``message``. Handlers in
``recipebox.api.errors`` turn them into JSON bodies.
"""


class ConstraintViolation(Exception):
    """A unique or foreign key constraint rejected a write."""


class AppError(Exception):
    """Base class for errors rendered as ``{"error", "message"}`` responses."""

    status_code = 500
    error = "Internal server error"
    message = "An unexpected error occurred"

    def __init__(self, message: str | None = None, error: str | None = None):
        if message is not None:
            self.message = message
        if error is not None:
            self.error = error
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


class ValidationFailed(AppError):
    """Malformed or missing input, with one entry per offending field."""

    status_code = 400
    error = "Validation failed"
    message = "One or more fields are invalid"

    def __init__(self, errors: list[dict], message: str | None = None):
        self.errors = errors
        if message is None and errors:
            message = errors[0]["message"]
        super().__init__(message)

    def to_dict(self) -> dict:
        return {**super().to_dict(), "errors": self.errors}


class AuthenticationRequired(AppError):
    status_code = 401
    error = "Authentication required"
    message = "You must be logged in to access this resource"


class InvalidCredentials(AppError):
    # Same message for unknown email and wrong password
    status_code = 401
    error = "Invalid credentials"
    message = "Incorrect email or password"


class NotFoundOrNotOwned(AppError):
    # Same message whether the record is missing or belongs to someone else
    status_code = 404
    error = "Not found"
    message = "The requested resource does not exist"


class EmailAlreadyExists(AppError):
    status_code = 400
    error = "Email already exists"
    message = "An account with this email already exists"


class StoreUnavailable(AppError):
    status_code = 500
    error = "Internal server error"
    message = "An unexpected error occurred"

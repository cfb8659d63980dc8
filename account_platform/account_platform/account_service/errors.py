"""
Domain errors raised by the account service.

The auth workflow and user directory raise these; route handlers turn them
into the `{error: ...}` response shape, and the application exception
handler turns `Unauthorized` into a 401.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    message = "Request failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class InvalidCredentials(DomainError):
    message = "Invalid email or password"


class EmailNotVerified(DomainError):
    message = "Email not verified"


class UserAlreadyExists(DomainError):
    message = "User already exists"


class EmailRequired(DomainError):
    message = "Email is required"


class InvalidOrExpiredToken(DomainError):
    message = "Invalid or expired verification token"


class TokenExpired(DomainError):
    message = "Verification token has expired"


class UserNotFound(DomainError):
    message = "User not found"


class VerificationEmailFailed(DomainError):
    message = "Could not send verification email"


class Unauthorized(DomainError):
    """Access guard rejection. `reason` is surfaced to the caller."""

    MISSING_TOKEN = "missing or invalid token"
    INVALID_TOKEN = "invalid token"
    USER_NOT_FOUND = "user not found"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Unauthorized: {reason}")

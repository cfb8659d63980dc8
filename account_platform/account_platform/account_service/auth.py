from passlib.context import CryptContext
from datetime import timedelta
from typing import Optional
import secrets
import jwt

from .models import utcnow

VERIFICATION_TOKEN_BYTES = 32


class PasswordHasher:
    """Memory-hard password hashing (argon2id) behind passlib."""

    def __init__(self, schemes=("argon2",)):
        self._context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: Optional[str]) -> bool:
        if not password_hash:
            return False
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            # unrecognised or corrupt hash
            return False


class InvalidTokenError(Exception):
    """Raised by TokenSigner.verify for any signature, expiry or shape problem."""


class TokenSigner:
    """
    Issues and verifies HS256 bearer tokens.

    Payload: {"sub": <user id>, "email": <email>, "iat": ..., "exp": ...}
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expiry_seconds: int = 24 * 60 * 60):
        self.secret = secret
        self.algorithm = algorithm
        self.expiry_seconds = expiry_seconds

    def sign(self, subject: str, email: str) -> str:
        issued_at = utcnow()
        payload = {
            "sub": subject,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.expiry_seconds),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> dict:
        """
        Decode and validate a token.

        Returns:
            The decoded payload; `sub` is guaranteed to be present.

        Raises:
            InvalidTokenError: bad signature, expired, malformed or missing subject
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.PyJWTError as exc:
            raise InvalidTokenError(str(exc)) from exc
        return payload


def generate_verification_token() -> str:
    """Random URL-safe string used as a one-time email verification token."""
    return secrets.token_urlsafe(VERIFICATION_TOKEN_BYTES)

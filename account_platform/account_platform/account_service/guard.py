"""
Access guard for protected endpoints.

`require_user` validates the bearer token, resolves its subject to a user
and attaches an AuthenticatedIdentity to `request.state.user`.
"""
from dataclasses import dataclass
from typing import Optional
import logging

from fastapi import Depends, Header, Request

from .auth import InvalidTokenError, TokenSigner
from .dependencies import get_token_signer, get_user_directory
from .errors import Unauthorized
from .models import User, UserRole
from .users import UserDirectory

logger = logging.getLogger(__name__)


@dataclass
class AuthenticatedIdentity:
    id: str
    email: str
    role: UserRole
    name: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "AuthenticatedIdentity":
        return cls(id=user.id, email=user.email, name=user.name, role=user.role)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name or self.email.split("@")[0],
            "role": self.role.value if self.role else UserRole.USER.value,
        }


def authenticate(authorization: Optional[str], signer: TokenSigner, users: UserDirectory) -> AuthenticatedIdentity:
    """
    Resolve an Authorization header value to an identity.

    Raises:
        Unauthorized: with reason MISSING_TOKEN, INVALID_TOKEN or USER_NOT_FOUND
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthorized(Unauthorized.MISSING_TOKEN)

    token = authorization.split(" ", 1)[1].strip()
    try:
        payload = signer.verify(token)
    except InvalidTokenError as exc:
        logger.debug("Bearer token rejected: %s", exc)
        raise Unauthorized(Unauthorized.INVALID_TOKEN) from exc

    user = users.find_by_id(payload["sub"])
    if user is None:
        raise Unauthorized(Unauthorized.USER_NOT_FOUND)

    return AuthenticatedIdentity.from_user(user)


def require_user(
    request: Request,
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
    signer: TokenSigner = Depends(get_token_signer),
    users: UserDirectory = Depends(get_user_directory),
) -> AuthenticatedIdentity:
    identity = authenticate(authorization, signer, users)
    request.state.user = identity
    return identity

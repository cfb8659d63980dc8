"""
Auth workflow: login, registration and email verification.

Pure business logic with no HTTP dependencies. Every collaborator is passed
in at construction so the routes (and tests) decide which directory, signer,
hasher and mail transport are used.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional
import logging

from .auth import PasswordHasher, TokenSigner, generate_verification_token
from .errors import (
    EmailNotVerified,
    InvalidCredentials,
    InvalidOrExpiredToken,
    TokenExpired,
    UserAlreadyExists,
    VerificationEmailFailed,
)
from .models import User, utcnow
from .users import UserDirectory
from .utils.mailer import MailSender, build_verification_message

logger = logging.getLogger(__name__)


@dataclass
class RegistrationResult:
    token: Optional[str]
    email_verification_needed: bool


class AuthWorkflow:
    def __init__(
        self,
        users: UserDirectory,
        signer: TokenSigner,
        hasher: PasswordHasher,
        mailer: MailSender,
        verification_required: bool = False,
        backend_url: str = "http://localhost:8000",
        verification_ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utcnow,
    ):
        self.users = users
        self.signer = signer
        self.hasher = hasher
        self.mailer = mailer
        self.verification_required = verification_required
        self.backend_url = backend_url
        self.verification_ttl = verification_ttl
        self.clock = clock

    def _issue_token(self, user: User) -> str:
        return self.signer.sign(subject=user.id, email=user.email)

    def login(self, email: str, password: str) -> str:
        """
        Authenticate by email and password and return a bearer token.

        Unknown email and wrong password produce the same error so the
        response does not reveal whether an account exists.

        Raises:
            InvalidCredentials: no such user, no local password, or wrong password
            EmailNotVerified: verification is required and still pending
        """
        user = self.users.find_by_email(email)
        if user is None:
            raise InvalidCredentials()

        if self.verification_required and user.email_verified_at is None:
            logger.info("Login blocked, email not verified: user_id=%s", user.id)
            raise EmailNotVerified()

        if not user.password_hash:
            raise InvalidCredentials()

        if not self.hasher.verify(password, user.password_hash):
            logger.info("Login failed, bad password: user_id=%s", user.id)
            raise InvalidCredentials()

        logger.info("Login succeeded: user_id=%s", user.id)
        return self._issue_token(user)

    def register(self, email: str, password: str, name: Optional[str] = None) -> RegistrationResult:
        """
        Create an account.

        With verification required, the user gets a pending verification
        token and an email, and no login token is issued yet.

        Raises:
            UserAlreadyExists: email already registered (checked before any hashing or write)
            VerificationEmailFailed: the verification email could not be sent; the
                pending account is removed so the email can register again
        """
        if self.users.find_by_email(email) is not None:
            raise UserAlreadyExists()

        now = self.clock()
        fields = {
            "email": email,
            "password_hash": self.hasher.hash(password),
            "name": name or email.split("@")[0],
            "created_at": now,
            "updated_at": now,
        }

        if not self.verification_required:
            user = self.users.create(**fields)
            logger.info("Registered user without verification: user_id=%s", user.id)
            return RegistrationResult(token=self._issue_token(user), email_verification_needed=False)

        verification_token = generate_verification_token()
        fields["email_verification_token"] = verification_token
        fields["email_verification_token_expires_at"] = now + self.verification_ttl
        user = self.users.create(**fields)

        message = build_verification_message(
            user.email,
            verification_token,
            self.backend_url,
            ttl_hours=int(self.verification_ttl.total_seconds() // 3600),
        )
        try:
            accepted = self.mailer.send(message)
        except Exception:
            logger.exception("Verification email delivery failed: user_id=%s", user.id)
            accepted = False

        if not accepted:
            # the link never reached the user, so free the email for another attempt
            logger.warning("Undoing registration without a delivered verification email: user_id=%s", user.id)
            self.users.delete(user.id)
            raise VerificationEmailFailed()

        logger.info("Registered user pending verification: user_id=%s", user.id)
        return RegistrationResult(token=None, email_verification_needed=True)

    def verify_email(self, token: str) -> bool:
        """
        Redeem a verification token. Never issues a login token.

        Raises:
            InvalidOrExpiredToken: no user holds this token
            TokenExpired: the token exists but its validity window has passed
        """
        user = self.users.find_by_verification_token(token)
        if user is None:
            raise InvalidOrExpiredToken()

        expires_at = user.email_verification_token_expires_at
        if expires_at is None or expires_at < self.clock():
            logger.info("Verification token expired: user_id=%s", user.id)
            raise TokenExpired()

        self.users.update(
            user.id,
            email_verified_at=self.clock(),
            email_verification_token=None,
            email_verification_token_expires_at=None,
        )
        logger.info("Email verified: user_id=%s", user.id)
        return True

"""
FastAPI dependencies wiring the workflow to its collaborators.

Override any of these through `app.dependency_overrides` to swap the mail
transport, the settings or the database session.
"""
from datetime import timedelta

from fastapi import Depends
from sqlalchemy.orm import Session

from .auth import PasswordHasher, TokenSigner
from .config import Settings, get_settings
from .db import get_db
from .users import UserDirectory
from .utils.mailer import LoggingMailSender, MailSender
from .workflow import AuthWorkflow

_password_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    return _password_hasher


def get_token_signer(settings: Settings = Depends(get_settings)) -> TokenSigner:
    return TokenSigner(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expiry_seconds=settings.JWT_EXPIRY_SECONDS,
    )


def get_mail_sender(settings: Settings = Depends(get_settings)) -> MailSender:
    return LoggingMailSender(sender=settings.MAIL_FROM)


def get_user_directory(db: Session = Depends(get_db)) -> UserDirectory:
    return UserDirectory(db)


def get_auth_workflow(
    settings: Settings = Depends(get_settings),
    users: UserDirectory = Depends(get_user_directory),
    signer: TokenSigner = Depends(get_token_signer),
    hasher: PasswordHasher = Depends(get_password_hasher),
    mailer: MailSender = Depends(get_mail_sender),
) -> AuthWorkflow:
    return AuthWorkflow(
        users=users,
        signer=signer,
        hasher=hasher,
        mailer=mailer,
        verification_required=settings.EMAIL_VERIFICATION_REQUIRED,
        backend_url=settings.BACKEND_URL,
        verification_ttl=timedelta(hours=settings.EMAIL_VERIFICATION_TTL_HOURS),
    )

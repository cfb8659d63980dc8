"""
Outbound mail for the account service.

Only the logging sink ships here; a real transport implements `MailSender`
and is wired in through `dependencies.get_mail_sender`.
"""
from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import urlencode
import logging

logger = logging.getLogger(__name__)

VERIFY_EMAIL_PATH = "/api/v1/auth/verify-email"


@dataclass
class MailMessage:
    to: str
    subject: str
    text: str
    html: Optional[str] = None
    sender: Optional[str] = None


class MailSender(Protocol):
    """Anything that can deliver a MailMessage. Returns True when accepted for delivery."""

    def send(self, message: MailMessage) -> bool:
        ...


class LoggingMailSender:
    """Default sink: writes messages to the log instead of delivering them."""

    def __init__(self, sender: str = "no-reply@localhost"):
        self.sender = sender

    def send(self, message: MailMessage) -> bool:
        logger.info(
            "MAIL from=%s to=%s subject=%r\n%s",
            message.sender or self.sender, message.to, message.subject, message.text
        )
        return True


def verification_link(backend_url: str, token: str) -> str:
    return f"{backend_url.rstrip('/')}{VERIFY_EMAIL_PATH}?{urlencode({'token': token})}"


def build_verification_message(email: str, token: str, backend_url: str, ttl_hours: int = 24) -> MailMessage:
    link = verification_link(backend_url, token)
    text = (
        "Welcome!\n\n"
        "Please confirm your email address by opening the link below:\n\n"
        f"{link}\n\n"
        f"The link expires in {ttl_hours} hours. If you did not create an account, ignore this email."
    )
    html = (
        "<p>Welcome!</p>"
        "<p>Please confirm your email address by clicking the link below:</p>"
        f'<p><a href="{link}">Verify email</a></p>'
        f"<p>The link expires in {ttl_hours} hours. If you did not create an account, ignore this email.</p>"
    )
    return MailMessage(to=email, subject="Verify your email address", text=text, html=html)

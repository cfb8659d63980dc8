"""Tests for the mail helpers."""
import logging

from account_platform.account_platform.account_service.utils.mailer import (
    LoggingMailSender,
    MailMessage,
    build_verification_message,
    verification_link,
)


def test_verification_link_embeds_token():
    link = verification_link("http://localhost:8000/", "abc-123")

    assert link == "http://localhost:8000/api/v1/auth/verify-email?token=abc-123"


def test_build_verification_message():
    message = build_verification_message("user@example.com", "abc-123", "https://api.example.com")

    assert message.to == "user@example.com"
    assert message.subject == "Verify your email address"
    assert "https://api.example.com/api/v1/auth/verify-email?token=abc-123" in message.text
    assert 'href="https://api.example.com/api/v1/auth/verify-email?token=abc-123"' in message.html
    assert "24 hours" in message.text


def test_build_verification_message_uses_ttl():
    message = build_verification_message("user@example.com", "abc-123", "https://api.example.com", ttl_hours=48)

    assert "48 hours" in message.text


def test_logging_sender_logs_and_accepts(caplog):
    sender = LoggingMailSender(sender="noreply@example.com")
    message = MailMessage(to="user@example.com", subject="Hello", text="Body text")

    with caplog.at_level(logging.INFO):
        assert sender.send(message) is True

    assert "to=user@example.com" in caplog.text
    assert "from=noreply@example.com" in caplog.text
    assert "Body text" in caplog.text

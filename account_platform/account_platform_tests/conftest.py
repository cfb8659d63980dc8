"""
Pytest configuration for account service tests.

Points the service at a throwaway SQLite file and a test signing secret
before any service module reads its settings.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_account_service.db")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("EMAIL_VERIFICATION_REQUIRED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from account_platform.account_platform.account_service.main import app
from account_platform.account_platform.account_service.db import Base, engine
from account_platform.account_platform.account_service.config import settings, get_settings
from account_platform.account_platform.account_service.dependencies import get_mail_sender


class RecordingMailSender:
    """Mail sender double that keeps every message it is asked to send."""

    def __init__(self):
        self.messages = []

    def send(self, message) -> bool:
        self.messages.append(message)
        return True


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    session = Session(bind=engine)
    yield session
    session.close()


@pytest.fixture
def outbox():
    sender = RecordingMailSender()
    app.dependency_overrides[get_mail_sender] = lambda: sender
    yield sender
    app.dependency_overrides.pop(get_mail_sender, None)


@pytest.fixture
def override_settings():
    """Call with keyword overrides, e.g. override_settings(EMAIL_VERIFICATION_REQUIRED=True)."""

    def apply(**values):
        patched = settings.model_copy(update=values)
        app.dependency_overrides[get_settings] = lambda: patched
        return patched

    yield apply
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c

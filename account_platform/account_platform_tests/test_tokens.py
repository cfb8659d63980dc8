"""Tests for password hashing, bearer token signing and verification tokens."""
import pytest
import jwt
from datetime import timedelta

from account_platform.account_platform.account_service.auth import (
    InvalidTokenError,
    PasswordHasher,
    TokenSigner,
    generate_verification_token,
)
from account_platform.account_platform.account_service.models import utcnow

SECRET = "unit-test-secret-that-is-long-enough-for-hs256"


def test_hash_is_argon2_and_verifies():
    hasher = PasswordHasher()
    hashed = hasher.hash("password123")

    assert hashed.startswith("$argon2id$")
    assert hasher.verify("password123", hashed) is True
    assert hasher.verify("wrong-password", hashed) is False


def test_hash_is_salted():
    hasher = PasswordHasher()
    assert hasher.hash("password123") != hasher.hash("password123")


@pytest.mark.parametrize("stored", [None, "", "not-a-hash"])
def test_verify_rejects_missing_or_corrupt_hash(stored):
    assert PasswordHasher().verify("password123", stored) is False


def test_sign_and_verify_round_trip():
    signer = TokenSigner(SECRET)
    payload = signer.verify(signer.sign(subject="user-123", email="test@example.com"))

    assert payload["sub"] == "user-123"
    assert payload["email"] == "test@example.com"
    assert payload["exp"] - payload["iat"] == 24 * 60 * 60


def test_expiry_follows_configuration():
    signer = TokenSigner(SECRET, expiry_seconds=60)
    payload = signer.verify(signer.sign(subject="user-123", email="test@example.com"))

    assert payload["exp"] - payload["iat"] == 60


def test_verify_rejects_foreign_signature():
    token = TokenSigner("another-secret-that-is-long-enough-too").sign("user-123", "t@example.com")

    with pytest.raises(InvalidTokenError):
        TokenSigner(SECRET).verify(token)


def test_verify_rejects_expired_token():
    past = utcnow() - timedelta(hours=2)
    token = jwt.encode(
        {"sub": "user-123", "email": "t@example.com", "iat": past, "exp": past + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        TokenSigner(SECRET).verify(token)


def test_verify_rejects_token_without_subject():
    token = jwt.encode({"email": "t@example.com", "exp": utcnow() + timedelta(hours=1)}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        TokenSigner(SECRET).verify(token)


def test_verify_rejects_garbage():
    with pytest.raises(InvalidTokenError):
        TokenSigner(SECRET).verify("not.a.jwt")


def test_verification_tokens_are_random_and_url_safe():
    first, second = generate_verification_token(), generate_verification_token()

    assert first != second
    assert len(first) >= 32
    assert all(c.isalnum() or c in "-_" for c in first)

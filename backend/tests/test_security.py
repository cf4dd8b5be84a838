from datetime import datetime, timedelta

import pytest
from jose import jwt

from app.config import get_settings
from app.exceptions import InvalidTokenError, TokenExpiredError
from app.security import (
    create_access_token,
    decode_access_token,
    generate_one_time_secret,
    hash_one_time_secret,
    hash_password,
    verify_password,
)


def test_password_hash_roundtrip():
    hashed = hash_password("s3cret!")

    assert hashed != "s3cret!"
    assert verify_password("s3cret!", hashed)
    assert not verify_password("wrong", hashed)


def test_access_token_carries_subject():
    token = create_access_token("user-123")

    assert decode_access_token(token) == "user-123"


def test_expired_access_token():
    token = create_access_token("user-123", expires_delta=timedelta(seconds=-1))

    with pytest.raises(TokenExpiredError):
        decode_access_token(token)


def test_token_signed_with_other_key():
    settings = get_settings()
    token = jwt.encode(
        {"sub": "user-123", "exp": datetime.utcnow() + timedelta(minutes=5)},
        "some-other-key",
        algorithm=settings.JWT_ALGORITHM,
    )

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_token_without_subject():
    settings = get_settings()
    token = jwt.encode(
        {"exp": datetime.utcnow() + timedelta(minutes=5)},
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_one_time_secret_stores_only_hash():
    secret = generate_one_time_secret(timedelta(minutes=10))

    assert len(secret.plaintext) == 64
    assert secret.hashed == hash_one_time_secret(secret.plaintext)
    assert secret.hashed != secret.plaintext
    assert secret.expires_at > datetime.utcnow()


def test_one_time_secrets_are_unique():
    assert generate_one_time_secret(timedelta(hours=1)).plaintext != generate_one_time_secret(timedelta(hours=1)).plaintext

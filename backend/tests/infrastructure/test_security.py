"""Admin security — password hashing and session-bound admin tokens."""

from datetime import timedelta

import pytest
from jose import jwt

from blindbeer.config import get_settings
from blindbeer.infrastructure.security import (
    create_admin_token, decode_admin_token, hash_password, verify_password,
)


def test_password_hash_round_trip():
    hashed = hash_password("hoppy-secret")
    assert hashed != "hoppy-secret"
    assert verify_password("hoppy-secret", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_against_malformed_hash_is_false():
    assert not verify_password("anything", "not-a-bcrypt-hash")


def test_token_grants_its_session_code():
    token = create_admin_token("ABC234")
    assert decode_admin_token(token) == "ABC234"


def test_expired_token_is_rejected():
    token = create_admin_token("ABC234", expires_delta=timedelta(seconds=-1))
    assert decode_admin_token(token) is None


def test_tampered_token_is_rejected():
    token = create_admin_token("ABC234")
    assert decode_admin_token(token[:-2] + "xx") is None


def test_token_without_admin_scope_is_rejected():
    settings = get_settings()
    token = jwt.encode(
        {"sub": "ABC234", "scope": "player"},
        settings.admin_token_secret, algorithm=settings.admin_token_algorithm,
    )
    assert decode_admin_token(token) is None


def test_password_over_72_bytes_is_refused_not_truncated():
    long_password = "é" * 36 + "X"
    with pytest.raises(ValueError):
        hash_password(long_password)
    stored = hash_password("é" * 36)
    assert not verify_password(long_password, stored)

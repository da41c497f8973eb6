"""Tests for session token and sign-in assertion helpers."""

from datetime import timedelta

import pytest
from jose import jwt

from app.infrastructure.security import (
    ALGORITHM,
    create_access_token,
    create_identity_assertion,
    decode_access_token,
    decode_identity_assertion,
)


def test_access_token_round_trip():
    token = create_access_token({"sub": "42"})
    assert decode_access_token(token)["sub"] == "42"


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "42"}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(ValueError):
        decode_access_token(token)


def test_token_signed_with_another_secret_is_rejected():
    token = jwt.encode({"sub": "42"}, "another-secret", algorithm=ALGORITHM)
    with pytest.raises(ValueError):
        decode_access_token(token)


def test_identity_assertion_carries_profile_claims():
    assertion = create_identity_assertion(
        provider="google",
        provider_account_id="abc-123",
        email="ada@example.com",
        name="Ada",
        picture="https://img.example.com/ada.png",
    )
    claims = decode_identity_assertion(assertion)
    assert claims["provider"] == "google"
    assert claims["sub"] == "abc-123"
    assert claims["email"] == "ada@example.com"
    assert claims["picture"] == "https://img.example.com/ada.png"


def test_session_token_is_not_an_identity_assertion():
    with pytest.raises(ValueError, match="not an identity assertion"):
        decode_identity_assertion(create_access_token({"sub": "1"}))

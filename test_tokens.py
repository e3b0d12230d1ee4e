"""
Tests for access/refresh token issuing and verification.
"""
from datetime import timedelta

import pytest
from jose import jwt

from app.utils.jwt_handler import TokenError, TokenIssuer

ACCESS_SECRET = "access-secret-for-tests-0123456789abcdef"
REFRESH_SECRET = "refresh-secret-for-tests-0123456789abcdef"


@pytest.fixture
def issuer():
    return TokenIssuer(access_secret=ACCESS_SECRET, refresh_secret=REFRESH_SECRET)


def test_access_token_carries_subject(issuer):
    token = issuer.create_access_token("admin-1")
    payload = issuer.verify_access_token(token)

    assert payload["sub"] == "admin-1"
    assert payload["type"] == "access"
    assert payload["exp"] - payload["iat"] == 15 * 60


def test_refresh_token_carries_subject_and_secret(issuer):
    token = issuer.create_refresh_token("admin-1")
    payload = issuer.verify_refresh_token(token)

    assert payload["sub"] == "admin-1"
    assert payload["type"] == "refresh"
    assert payload["jti"]
    assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60


def test_refresh_tokens_are_unique(issuer):
    assert issuer.create_refresh_token("admin-1") != issuer.create_refresh_token("admin-1")


def test_kinds_are_not_interchangeable(issuer):
    access = issuer.create_access_token("admin-1")
    refresh = issuer.create_refresh_token("admin-1")

    with pytest.raises(TokenError):
        issuer.verify_refresh_token(access)
    with pytest.raises(TokenError):
        issuer.verify_access_token(refresh)


def test_type_claim_checked_even_with_right_secret(issuer):
    forged = jwt.encode({"sub": "admin-1", "type": "refresh"}, ACCESS_SECRET, algorithm="HS256")

    with pytest.raises(TokenError):
        issuer.verify_access_token(forged)


def test_expired_token_rejected(issuer):
    token = issuer.create_access_token("admin-1", expires_delta=timedelta(seconds=-5))

    with pytest.raises(TokenError, match="expired"):
        issuer.verify_access_token(token)


def test_bad_signature_rejected(issuer):
    other = TokenIssuer(
        access_secret="some-other-access-secret-0123456789abcdef",
        refresh_secret=REFRESH_SECRET,
    )
    token = other.create_access_token("admin-1")

    with pytest.raises(TokenError):
        issuer.verify_access_token(token)


def test_malformed_token_rejected(issuer):
    with pytest.raises(TokenError):
        issuer.verify_access_token("not.a.jwt")
    with pytest.raises(TokenError):
        issuer.verify_access_token("")


def test_missing_subject_rejected(issuer):
    token = jwt.encode({"type": "access"}, ACCESS_SECRET, algorithm="HS256")

    with pytest.raises(TokenError):
        issuer.verify_access_token(token)


def test_issue_pair(issuer):
    pair = issuer.issue_pair("admin-1")

    assert issuer.verify_access_token(pair.access_token)["sub"] == "admin-1"
    assert issuer.verify_refresh_token(pair.refresh_token)["sub"] == "admin-1"

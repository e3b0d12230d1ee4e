"""
Tests for the argon2 password hashing adapter.
"""
import pytest

from app.utils.hash import hash_password, verify_password


def test_hash_is_salted():
    """Same input, different hashes"""
    first = hash_password("Aa123456!")
    second = hash_password("Aa123456!")

    assert first != second
    assert first.startswith("$argon2")
    assert "Aa123456!" not in first


def test_verify_roundtrip():
    hashed = hash_password("Aa123456!")

    assert verify_password("Aa123456!", hashed) is True
    assert verify_password("Aa123456?", hashed) is False


def test_verify_malformed_hash_returns_false():
    assert verify_password("Aa123456!", "not-a-hash") is False
    assert verify_password("Aa123456!", "$argon2id$v=19$broken") is False
    assert verify_password("Aa123456!", "") is False
    assert verify_password("Aa123456!", None) is False


def test_verify_empty_password_returns_false():
    hashed = hash_password("Aa123456!")
    assert verify_password("", hashed) is False


def test_hash_empty_password_rejected():
    with pytest.raises(ValueError):
        hash_password("")

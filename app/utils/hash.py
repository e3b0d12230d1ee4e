# app/utils/hash.py
from functools import lru_cache
from passlib.context import CryptContext
import logging

logger = logging.getLogger(__name__)

# Argon2id with a random salt per hash; the salt is embedded in the output
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password (or any secret, e.g. a refresh token) for storage."""
    if not password:
        raise ValueError("Cannot hash an empty value")
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str | None) -> bool:
    """
    Check a plaintext against a stored hash.

    Returns False for empty input or a malformed stored hash instead of raising.
    """
    if not password or not hashed:
        return False
    try:
        return pwd_context.verify(password, hashed)
    except (ValueError, TypeError):
        logger.warning("Stored hash could not be parsed")
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return pwd_context.hash("timing-equaliser")


def burn_verification(password: str) -> None:
    """Spend the same time as a real verification when there is no record to check against."""
    verify_password(password or "x", _dummy_hash())

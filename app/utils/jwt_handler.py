# app/utils/jwt_handler.py
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import secrets
import logging

from jose import JWTError, ExpiredSignatureError, jwt

from app.config import settings
from app.schemas.token import TokenPair

logger = logging.getLogger(__name__)

ACCESS = "access"
REFRESH = "refresh"


class TokenError(Exception):
    """Raised when a token is expired, malformed, forged or of the wrong kind."""


@dataclass
class TokenIssuer:
    access_secret: str
    refresh_secret: str
    algorithm: str = "HS256"
    access_ttl: timedelta = timedelta(minutes=15)
    refresh_ttl: timedelta = timedelta(days=7)

    @classmethod
    def from_settings(cls, cfg=settings) -> "TokenIssuer":
        return cls(
            access_secret=cfg.JWT_ACCESS_SECRET,
            refresh_secret=cfg.JWT_REFRESH_SECRET,
            algorithm=cfg.ALGORITHM,
            access_ttl=timedelta(minutes=cfg.ACCESS_TOKEN_EXPIRE_MINUTES),
            refresh_ttl=timedelta(days=cfg.REFRESH_TOKEN_EXPIRE_DAYS),
        )

    def _encode(self, claims: dict, secret: str, ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        to_encode = claims.copy()
        to_encode.update({
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
        })
        return jwt.encode(to_encode, secret, algorithm=self.algorithm)

    def create_access_token(self, admin_id: str, expires_delta: Optional[timedelta] = None) -> str:
        """
        Create JWT access token
        """
        return self._encode(
            {"sub": admin_id, "type": ACCESS},
            self.access_secret,
            expires_delta if expires_delta is not None else self.access_ttl,
        )

    def create_refresh_token(self, admin_id: str, expires_delta: Optional[timedelta] = None) -> str:
        """
        Create JWT refresh token

        The random jti keeps two tokens minted in the same second distinct.
        """
        return self._encode(
            {"sub": admin_id, "type": REFRESH, "jti": secrets.token_urlsafe(32)},
            self.refresh_secret,
            expires_delta if expires_delta is not None else self.refresh_ttl,
        )

    def issue_pair(self, admin_id: str) -> TokenPair:
        return TokenPair(
            access_token=self.create_access_token(admin_id),
            refresh_token=self.create_refresh_token(admin_id),
        )

    def _decode(self, token: str, secret: str, kind: str) -> dict:
        if not token:
            raise TokenError("Token missing")
        try:
            payload = jwt.decode(token, secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise TokenError("Token expired")
        except JWTError:
            raise TokenError("Invalid token")

        if payload.get("type") != kind:
            raise TokenError("Wrong token type")
        if not payload.get("sub"):
            raise TokenError("Token has no subject")
        return payload

    def verify_access_token(self, token: str) -> dict:
        return self._decode(token, self.access_secret, ACCESS)

    def verify_refresh_token(self, token: str) -> dict:
        return self._decode(token, self.refresh_secret, REFRESH)


token_issuer = TokenIssuer.from_settings(settings)


def get_token_issuer() -> TokenIssuer:
    return token_issuer

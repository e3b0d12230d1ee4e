# app/services/auth_service.py
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.admin import Admin
from app.schemas.admin import AdminRegister, AdminLogin
from app.schemas.token import TokenPair
from app.utils.hash import hash_password, verify_password, burn_verification
from app.utils.jwt_handler import TokenIssuer

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
ACCESS_DENIED = "Access denied"


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class AuthService:
    """
    Admin session lifecycle.

    Each admin has at most one live refresh token; only its argon2 hash is
    stored. Login overwrites it, refresh rotates it and logout clears it, so a
    refresh token is usable once and never after logout.
    """

    def __init__(self, db: Session, issuer: TokenIssuer):
        self.db = db
        self.issuer = issuer

    # ------------------ Lookups ------------------

    def _get_by_email(self, email: str) -> Optional[Admin]:
        return self.db.query(Admin).filter(
            func.lower(Admin.email) == email.strip().lower()
        ).first()

    def _get_by_id(self, admin_id: str) -> Optional[Admin]:
        return self.db.query(Admin).filter(Admin.id == admin_id).first()

    # ------------------ Session storage ------------------

    def _start_session(self, admin: Admin) -> TokenPair:
        tokens = self.issuer.issue_pair(admin.id)
        admin.refresh_token_hash = hash_password(tokens.refresh_token)
        self.db.commit()
        return tokens

    # ------------------ Operations ------------------

    def register(self, data: AdminRegister) -> TokenPair:
        normalized_email = data.email.strip().lower()
        logger.info(f"Admin registration started for: {normalized_email}")

        if self._get_by_email(normalized_email):
            logger.warning(f"Email already registered: {normalized_email}")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

        admin = Admin(
            email=normalized_email,
            name=data.name,
            avatar=data.avatar,
            password_hash=hash_password(data.password),
        )
        self.db.add(admin)
        try:
            self.db.flush()
        except IntegrityError:
            # Lost a race against a concurrent registration for the same email
            self.db.rollback()
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

        tokens = self._start_session(admin)
        logger.info(f"Admin created: {admin.id}")
        return tokens

    def login(self, data: AdminLogin) -> TokenPair:
        admin = self._get_by_email(data.email)

        if admin is None:
            burn_verification(data.password)
            raise _unauthorized(INVALID_CREDENTIALS)

        if not verify_password(data.password, admin.password_hash) or not admin.is_active:
            logger.info(f"Failed login for admin {admin.id}")
            raise _unauthorized(INVALID_CREDENTIALS)

        tokens = self._start_session(admin)
        logger.info(f"Admin logged in: {admin.id}")
        return tokens

    def refresh(self, admin_id: str, refresh_token: str) -> TokenPair:
        admin = self._get_by_id(admin_id)

        if admin is None or not admin.is_active or not admin.refresh_token_hash:
            raise _unauthorized(ACCESS_DENIED)

        if not verify_password(refresh_token, admin.refresh_token_hash):
            logger.warning(f"Stale or unknown refresh token presented for admin {admin.id}")
            raise _unauthorized(ACCESS_DENIED)

        tokens = self._start_session(admin)
        logger.info(f"Tokens rotated for admin {admin.id}")
        return tokens

    def logout(self, admin_id: str) -> None:
        admin = self._get_by_id(admin_id)
        if admin is None:
            logger.warning(f"Logout for unknown admin {admin_id}")
            return

        if admin.refresh_token_hash is not None:
            admin.refresh_token_hash = None
            self.db.commit()
        logger.info(f"Admin logged out: {admin.id}")

    def profile(self, admin_id: str) -> Admin:
        admin = self._get_by_id(admin_id)
        if admin is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Admin not found")
        return admin

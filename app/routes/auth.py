# app/routes/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from app.auth.dependencies import (
    RefreshCredentials,
    get_current_admin_id,
    public,
    refresh_token_guard,
)
from app.database import get_db
from app.schemas.admin import AdminLogin, AdminRegister, AdminResponse, MessageResponse
from app.schemas.token import TokenPair
from app.services.auth_service import AuthService
from app.utils.jwt_handler import TokenIssuer, get_token_issuer

router = APIRouter(
    prefix="/auth",
    tags=["Admin Authentication"]
)

logger = logging.getLogger(__name__)


def get_auth_service(
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(db, issuer)


@router.post("/register", response_model=TokenPair, status_code=status.HTTP_201_CREATED)
@public
def register(data: AdminRegister, auth: AuthService = Depends(get_auth_service)):
    """Create an admin account and open its first session."""
    return auth.register(data)


@router.post("/login", response_model=TokenPair)
@public
def login(data: AdminLogin, auth: AuthService = Depends(get_auth_service)):
    return auth.login(data)


@router.post("/refresh", response_model=TokenPair)
@public
def refresh(
    creds: RefreshCredentials = Depends(refresh_token_guard),
    auth: AuthService = Depends(get_auth_service),
):
    """Exchange a refresh token (as the bearer token) for a new token pair. The old one stops working."""
    return auth.refresh(creds.admin_id, creds.refresh_token)


@router.post("/logout", response_model=MessageResponse)
def logout(
    admin_id: str = Depends(get_current_admin_id),
    auth: AuthService = Depends(get_auth_service),
):
    auth.logout(admin_id)
    return {"message": "Logged out"}


@router.get("/me", response_model=AdminResponse)
def me(
    admin_id: str = Depends(get_current_admin_id),
    auth: AuthService = Depends(get_auth_service),
):
    return auth.profile(admin_id)

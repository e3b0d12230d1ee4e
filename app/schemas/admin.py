from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, RequestModel


class AdminRole(str, Enum):
    admin = "admin"
    staff = "staff"


class AdminRegister(RequestModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: str = Field(min_length=1)
    avatar: Optional[str] = None


class AdminLogin(RequestModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AdminResponse(CamelModel):
    id: str
    email: EmailStr
    name: str
    avatar: Optional[str] = None
    role: AdminRole
    is_active: bool
    created_at: Optional[datetime] = None


class MessageResponse(CamelModel):
    message: str

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import Field

from app.schemas.common import CamelModel, RequestModel


class ServiceCategory(str, Enum):
    extensions = "extensions"
    manicure = "manicure"
    nail_art = "nail-art"
    pedicure = "pedicure"
    spa = "spa"


class ServiceCreate(RequestModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: float = Field(ge=0)
    duration: int = Field(ge=15, description="Minutes")
    category: ServiceCategory
    image_url: Optional[str] = None
    featured: bool = False
    is_active: bool = True
    sort_index: int = 0


class ServiceUpdate(RequestModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=15)
    category: Optional[ServiceCategory] = None
    image_url: Optional[str] = None
    featured: Optional[bool] = None
    is_active: Optional[bool] = None
    sort_index: Optional[int] = None


class ServiceResponse(CamelModel):
    id: str
    name: str
    description: str
    price: float
    duration: int
    category: ServiceCategory
    image_url: Optional[str] = None
    featured: bool
    is_active: bool
    sort_index: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

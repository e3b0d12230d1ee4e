from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import Field

from app.schemas.common import CamelModel, RequestModel


class GalleryCategory(str, Enum):
    all = "all"
    extensions = "extensions"
    manicure = "manicure"
    nail_art = "nail-art"
    pedicure = "pedicure"
    seasonal = "seasonal"


class GalleryCreate(RequestModel):
    image_url: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: Optional[str] = None
    category: GalleryCategory
    price: Optional[str] = Field(default=None, description="Display price, e.g. $45")
    duration: Optional[str] = Field(default=None, description="Display duration, e.g. 60 minutes")
    featured: bool = False
    is_active: bool = True
    sort_index: int = 0


class GalleryUpdate(RequestModel):
    image_url: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[GalleryCategory] = None
    price: Optional[str] = None
    duration: Optional[str] = None
    featured: Optional[bool] = None
    is_active: Optional[bool] = None
    sort_index: Optional[int] = None


class GalleryResponse(CamelModel):
    id: str
    image_url: str
    title: str
    description: Optional[str] = None
    category: GalleryCategory
    price: Optional[str] = None
    duration: Optional[str] = None
    featured: bool
    is_active: bool
    sort_index: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

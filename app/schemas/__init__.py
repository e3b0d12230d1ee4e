# app/schemas/__init__.py
from .common import Paginated, PaginationMeta, PageParams
from .token import TokenPair
from .admin import AdminRegister, AdminLogin, AdminResponse, AdminRole, MessageResponse
from .service import ServiceCategory, ServiceCreate, ServiceUpdate, ServiceResponse
from .booking import BookingStatus, BookingCreate, BookingStatusUpdate, BookingResponse
from .gallery import GalleryCategory, GalleryCreate, GalleryUpdate, GalleryResponse

__all__ = [
    "Paginated",
    "PaginationMeta",
    "PageParams",
    "TokenPair",
    "AdminRegister",
    "AdminLogin",
    "AdminResponse",
    "AdminRole",
    "MessageResponse",
    "ServiceCategory",
    "ServiceCreate",
    "ServiceUpdate",
    "ServiceResponse",
    "BookingStatus",
    "BookingCreate",
    "BookingStatusUpdate",
    "BookingResponse",
    "GalleryCategory",
    "GalleryCreate",
    "GalleryUpdate",
    "GalleryResponse",
]

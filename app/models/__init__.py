# app/models/__init__.py

from .admin import Admin
from .service import Service
from .booking import Booking
from .gallery import GalleryItem

__all__ = ["Admin", "Service", "Booking", "GalleryItem"]

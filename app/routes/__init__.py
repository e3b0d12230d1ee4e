# Import all routes
from .auth import router as auth_router
from .services import router as services_router
from .bookings import router as bookings_router
from .gallery import router as gallery_router
from .health import router as health_router

# All routers that should be included in main app
__all__ = [
    "auth_router",
    "services_router",
    "bookings_router",
    "gallery_router",
    "health_router"
]

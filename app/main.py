from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
import logging

from app.auth.dependencies import access_token_guard, public, refresh_token_guard
from app.config import settings
from app.database import init_db
from app.services.storage_service import storage_service

# Enable logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Nail Salon Admin API starting up...")
    init_db()
    storage_service.init()
    logger.info(f"🌐 CORS enabled for origins: {settings.cors_origins}")
    logger.info("✅ Server is ready to handle requests")

    yield

    logger.info("🛑 Nail Salon Admin API shutting down...")


# Init app; every route requires an access token unless marked @public
app = FastAPI(
    title="Nail Salon Admin API",
    version="1.0.0",
    lifespan=lifespan,
    dependencies=[Depends(access_token_guard)],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=["X-Total-Count", "X-Page", "X-Per-Page"],
)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    return response


# Malformed input is a 400, not FastAPI's default 422
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.exception(f"Internal server error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def _api_routes():
    # Included routers are not always flattened into app.routes, so read them from their source
    for router in [app.router, *routers]:
        for route in router.routes:
            if isinstance(route, APIRoute):
                yield route


def _advertised_public(route: APIRoute) -> bool:
    if not getattr(route.endpoint, "is_public", False):
        return False
    # Public but still bearer-authenticated with a refresh token
    return not any(dep.call is refresh_token_guard for dep in route.dependant.dependencies)


# Custom OpenAPI
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description="Nail salon admin API - authentication, services, bookings and gallery",
        routes=app.routes,
    )

    # The guard is app-wide, so the generator marks every operation as secured
    public_ids = {route.unique_id for route in _api_routes() if _advertised_public(route)}
    for path_item in openapi_schema["paths"].values():
        for operation in path_item.values():
            if isinstance(operation, dict) and operation.get("operationId") in public_ids:
                operation.pop("security", None)

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi

# Route Registrations
from app.routes import (
    auth_router,
    services_router,
    bookings_router,
    gallery_router,
    health_router,
)

routers = [
    auth_router,
    services_router,
    bookings_router,
    gallery_router,
    health_router,
]

for router in routers:
    app.include_router(router)
    logger.info(f"Included router: {router.prefix or '/'}")


@app.get("/", include_in_schema=False)
@public
async def root():
    return {
        "status": "ok",
        "message": "Welcome to the Nail Salon Admin API",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": [
            "/auth/* - Admin authentication",
            "/services/* - Service catalog",
            "/bookings/* - Booking intake and workflow",
            "/gallery/* - Photo gallery",
            "/health - System health check"
        ]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="127.0.0.1",
        port=settings.PORT,
        reload=True,
        log_level="info"
    )

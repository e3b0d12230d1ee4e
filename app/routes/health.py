# app/routes/health.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
import datetime
import logging

from app.auth.dependencies import public
from app.config import settings
from app.database import get_db

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Health Check"])


@router.get("/health")
@public
def health_check(db: Session = Depends(get_db)):
    """
    Health check with database connectivity
    """
    health_status = {
        "status": "healthy",
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "service": "Nail Salon Admin API",
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT,
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["database"] = {"status": "connected"}
    except Exception as e:
        logger.error(f"Health check database error: {str(e)}")
        health_status["database"] = {"status": "disconnected"}
        health_status["status"] = "degraded"

    return health_status

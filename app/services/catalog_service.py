# app/services/catalog_service.py
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.service import Service
from app.schemas.common import PageParams
from app.schemas.service import ServiceCategory, ServiceCreate, ServiceUpdate
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)


def create_service(db: Session, data: ServiceCreate) -> Service:
    service = Service(**data.model_dump())
    db.add(service)
    db.commit()
    db.refresh(service)
    logger.info(f"Service created: {service.id} ({service.name})")
    return service


def list_services(
    db: Session,
    params: PageParams,
    category: Optional[ServiceCategory] = None,
    featured: Optional[bool] = None,
    is_active: Optional[bool] = None,
) -> dict:
    query = db.query(Service)
    if category is not None:
        query = query.filter(Service.category == category.value)
    if featured is not None:
        query = query.filter(Service.featured == featured)
    if is_active is not None:
        query = query.filter(Service.is_active == is_active)

    query = query.order_by(Service.sort_index.asc(), Service.created_at.desc())
    return paginate(query, params)


def get_service(db: Session, service_id: str) -> Service:
    service = db.query(Service).filter(Service.id == service_id).first()
    if not service:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Service {service_id} not found")
    return service


def update_service(db: Session, service_id: str, data: ServiceUpdate) -> Service:
    service = get_service(db, service_id)
    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(service, field, value)
    db.commit()
    db.refresh(service)
    return service


def delete_service(db: Session, service_id: str) -> None:
    service = get_service(db, service_id)
    db.delete(service)
    try:
        db.commit()
    except IntegrityError:
        # Bookings still reference this service
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Service has bookings; deactivate it instead",
        )
    logger.info(f"Service deleted: {service_id}")

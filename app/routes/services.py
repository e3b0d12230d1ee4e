# app/routes/services.py
from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.auth.dependencies import public
from app.database import get_db
from app.schemas.common import PageParams, Paginated
from app.schemas.service import ServiceCategory, ServiceCreate, ServiceResponse, ServiceUpdate
from app.services import catalog_service
from app.utils.pagination import page_params

router = APIRouter(
    prefix="/services",
    tags=["Services"]
)


@router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
def create_service(data: ServiceCreate, db: Session = Depends(get_db)):
    return catalog_service.create_service(db, data)


@router.get("", response_model=Paginated[ServiceResponse])
@public
def list_services(
    category: Optional[ServiceCategory] = Query(None),
    featured: Optional[bool] = Query(None),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    params: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
):
    return catalog_service.list_services(db, params, category, featured, is_active)


@router.get("/{service_id}", response_model=ServiceResponse)
@public
def get_service(service_id: str, db: Session = Depends(get_db)):
    return catalog_service.get_service(db, service_id)


@router.patch("/{service_id}", response_model=ServiceResponse)
def update_service(service_id: str, data: ServiceUpdate, db: Session = Depends(get_db)):
    return catalog_service.update_service(db, service_id, data)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(service_id: str, db: Session = Depends(get_db)):
    catalog_service.delete_service(db, service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# app/routes/bookings.py
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.auth.dependencies import public
from app.database import get_db
from app.schemas.booking import BookingCreate, BookingResponse, BookingStatus, BookingStatusUpdate
from app.schemas.common import PageParams, Paginated
from app.services import booking_service
from app.utils.pagination import page_params

router = APIRouter(
    prefix="/bookings",
    tags=["Bookings"]
)


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
@public
def create_booking(data: BookingCreate, db: Session = Depends(get_db)):
    """Public booking form submission. New bookings start as pending."""
    return booking_service.create_booking(db, data)


@router.get("", response_model=Paginated[BookingResponse])
def list_bookings(
    booking_status: Optional[BookingStatus] = Query(None, alias="status"),
    service_id: Optional[str] = Query(None, alias="serviceId"),
    on_date: Optional[date] = Query(None, alias="date"),
    params: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
):
    return booking_service.list_bookings(db, params, booking_status, service_id, on_date)


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(booking_id: str, db: Session = Depends(get_db)):
    return booking_service.get_booking(db, booking_id)


@router.patch("/{booking_id}/status", response_model=BookingResponse)
def update_booking_status(booking_id: str, data: BookingStatusUpdate, db: Session = Depends(get_db)):
    return booking_service.update_booking_status(db, booking_id, data.status)

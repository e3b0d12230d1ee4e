# app/services/booking_service.py
import logging
from datetime import date
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.booking import Booking
from app.models.service import Service
from app.schemas.booking import BookingCreate, BookingStatus
from app.schemas.common import PageParams
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)


def create_booking(db: Session, data: BookingCreate) -> Booking:
    service = db.query(Service).filter(
        Service.id == data.service_id,
        Service.is_active == True
    ).first()
    if not service:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Service {data.service_id} not found")

    customer = data.customer_info
    booking = Booking(
        service_id=service.id,
        date=data.date,
        time_slot=data.time_slot,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email.strip().lower(),
        phone=customer.phone,
        notes=data.notes,
        status=BookingStatus.pending.value,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info(f"Booking {booking.id} received for {booking.date} {booking.time_slot} ({service.name})")
    return booking


def list_bookings(
    db: Session,
    params: PageParams,
    booking_status: Optional[BookingStatus] = None,
    service_id: Optional[str] = None,
    on_date: Optional[date] = None,
) -> dict:
    query = db.query(Booking)
    if booking_status is not None:
        query = query.filter(Booking.status == booking_status.value)
    if service_id:
        query = query.filter(Booking.service_id == service_id)
    if on_date is not None:
        query = query.filter(Booking.date == on_date)

    query = query.order_by(Booking.date.desc(), Booking.time_slot.asc(), Booking.created_at.desc())
    return paginate(query, params)


def get_booking(db: Session, booking_id: str) -> Booking:
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Booking {booking_id} not found")
    return booking


def update_booking_status(db: Session, booking_id: str, new_status: BookingStatus) -> Booking:
    booking = get_booking(db, booking_id)
    previous = booking.status
    booking.status = new_status.value
    db.commit()
    db.refresh(booking)
    logger.info(f"Booking {booking_id} status: {previous} -> {booking.status}")
    return booking

# app/models/booking.py
from sqlalchemy import Column, String, DateTime, Date, Text, ForeignKey
from sqlalchemy.sql import func
from app.database import Base
import uuid


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = {'comment': 'Customer appointment requests'}

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    service_id = Column(
        String(36),
        ForeignKey("services.id", name='fk_booking_service'),
        nullable=False,
        index=True
    )
    date = Column(Date, nullable=False, index=True)
    time_slot = Column(String(5), nullable=False)

    # Customer Information
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(30), nullable=False)

    notes = Column(Text, nullable=True)
    status = Column(String(20), default="pending", nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    @property
    def customer_info(self) -> dict:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
        }

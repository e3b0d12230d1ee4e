import datetime as dt
from enum import Enum
from typing import Optional
from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, RequestModel

# 09:00 through 17:30 in half-hour steps
TIME_SLOT_PATTERN = r"^(09|1[0-7]):(00|30)$"
PHONE_PATTERN = r"^\+?[\d\s\-()]+$"


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"


class CustomerInfo(RequestModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(pattern=PHONE_PATTERN)


class BookingCreate(RequestModel):
    service_id: str = Field(min_length=1)
    date: dt.date
    time_slot: str = Field(
        pattern=TIME_SLOT_PATTERN,
        description="Between 09:00 and 17:30 in 30-minute intervals (e.g. 09:00, 09:30)"
    )
    customer_info: CustomerInfo
    notes: Optional[str] = None


class BookingStatusUpdate(RequestModel):
    status: BookingStatus


class CustomerInfoResponse(CamelModel):
    first_name: str
    last_name: str
    email: str
    phone: str


class BookingResponse(CamelModel):
    id: str
    service_id: str
    date: dt.date
    time_slot: str
    customer_info: CustomerInfoResponse
    notes: Optional[str] = None
    status: BookingStatus
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

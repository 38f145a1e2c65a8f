"""Reservation schemas - availability lookups and bookings."""

import datetime as dt
from datetime import date, datetime

from pydantic import Field

from aperture_schemas.base import ApiModel


class ReservedTable(ApiModel):
    """Table snapshot embedded in a reservation (every field may be null)."""

    id: int
    table_number: str | None = None
    capacity: int | None = None
    min_capacity: int | None = None
    status: str | None = None
    description: str | None = None
    is_active: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AvailableTable(ApiModel):
    """Table offered for a time slot."""

    id: int
    table_number: str
    capacity: int
    min_capacity: int
    status: str
    description: str | None = None
    is_active: bool


class TimeSlot(ApiModel):
    """A bookable start time and the tables free at that time."""

    time: str = Field(description="HH:MM:SS, 24-hour clock")
    tables_available: int
    available_tables: list[AvailableTable] = Field(default_factory=list)


class AvailabilityResponse(ApiModel):
    """Availability for a date and party size."""

    date: dt.date
    party_size: int
    available_slots: list[TimeSlot] = Field(default_factory=list)


class CreateReservationRequest(ApiModel):
    """Booking request; guest fields are required for guest reservations."""

    reservation_date: date
    start_time: str = Field(description="HH:MM:SS, 24-hour clock")
    party_size: int = Field(ge=1)
    special_requests: str | None = None

    guest_name: str | None = None
    guest_email: str | None = None
    guest_phone: str | None = None


class ReservationResponse(ApiModel):
    """A reservation as returned by the backend."""

    id: int
    confirmation_code: str
    user_id: str | None = None
    guest_name: str | None = None
    guest_email: str | None = None
    guest_phone: str | None = None
    table: ReservedTable
    party_size: int
    reservation_date: date
    start_time: str
    end_time: str
    status: str
    special_requests: str | None = None
    pre_order_id: int | None = None
    reminder_sent: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UpdateReservationStatusRequest(ApiModel):
    """Admin status change for a reservation."""

    new_status: str
    reason: str | None = None

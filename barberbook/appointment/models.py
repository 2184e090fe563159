"""Appointment domain models."""

import uuid
from datetime import UTC, datetime
from enum import Enum

from pydantic import field_validator
from sqlmodel import Field, SQLModel

MIN_RATING = 1
MAX_RATING = 5


class AppointmentStatus(str, Enum):
    """Appointment status.

    - Scheduled: booked by a client
    - Completed: visit took place, may carry a rating
    - Cancelled: visit will not take place
    """

    scheduled = "Scheduled"
    completed = "Completed"
    cancelled = "Cancelled"


def new_appointment_id() -> str:
    return f"appt-{uuid.uuid4().hex}"


def as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class Appointment(SQLModel):
    """A booking of one service from one barber by one client.

    client_id, barber_id and service_id are not checked against existing
    users or services when the appointment is recorded.
    """

    id: str = Field(default_factory=new_appointment_id)
    client_id: str
    barber_id: str
    service_id: str
    date: datetime
    status: AppointmentStatus = Field(default=AppointmentStatus.scheduled)
    rating: int | None = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    review: str | None = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return as_utc(value)

    @property
    def is_rated(self) -> bool:
        return self.status == AppointmentStatus.completed and bool(self.rating)

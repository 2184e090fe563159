"""Appointment domain schemas."""

from datetime import datetime

from pydantic import Field, field_serializer, field_validator
from sqlmodel import SQLModel

from barberbook.appointment.models import (
    MAX_RATING,
    MIN_RATING,
    Appointment,
    AppointmentStatus,
    as_utc,
)
from barberbook.store.store import DomainStore


class AppointmentCreate(SQLModel):
    """Request schema for booking. The client is the current user."""

    barber_id: str
    service_id: str
    date: datetime

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return as_utc(value)


class RatingRequest(SQLModel):
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING)
    review: str = ""


class StatusUpdate(SQLModel):
    status: AppointmentStatus


class AppointmentDetail(SQLModel):
    """Appointment with resolved display names.

    Names fall back to "Unknown ..." when a reference cannot be resolved.
    """

    id: str
    client_id: str
    client_name: str
    barber_id: str
    barber_name: str
    service_id: str
    service_name: str
    date: datetime
    status: AppointmentStatus
    rating: int | None = None
    review: str | None = None

    @field_serializer("date")
    def serialize_date(self, value: datetime) -> str:
        """Format as ISO 8601 in UTC with a Z suffix."""
        return as_utc(value).isoformat().replace("+00:00", "Z")

    @classmethod
    def from_appointment(
        cls, appointment: Appointment, store: DomainStore
    ) -> "AppointmentDetail":
        return cls(
            id=appointment.id,
            client_id=appointment.client_id,
            client_name=store.client_name(appointment.client_id),
            barber_id=appointment.barber_id,
            barber_name=store.barber_name(appointment.barber_id),
            service_id=appointment.service_id,
            service_name=store.resolve_service_name(
                appointment.barber_id, appointment.service_id
            ),
            date=appointment.date,
            status=appointment.status,
            rating=appointment.rating,
            review=appointment.review,
        )

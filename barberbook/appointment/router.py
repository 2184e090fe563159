"""Appointment domain router.

Booking, listing and rating for the client area (clients and barbers).
"""

from fastapi import APIRouter, Depends, status

from barberbook.appointment.exceptions import (
    AppointmentNotCompletedError,
    AppointmentNotFoundError,
    NotAppointmentOwnerError,
)
from barberbook.appointment.models import AppointmentStatus
from barberbook.appointment.schemas import (
    AppointmentCreate,
    AppointmentDetail,
    RatingRequest,
)
from barberbook.auth.access import Area
from barberbook.auth.dependencies import ClientAreaUserDep, require_area
from barberbook.core.constants import CommonResponses, Routes
from barberbook.core.deps import StoreDep

router = APIRouter(
    prefix=Routes.APPOINTMENTS.prefix,
    tags=[Routes.APPOINTMENTS.tag],
    dependencies=[Depends(require_area(Area.client))],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
    },
)


@router.post("", response_model=AppointmentDetail, status_code=status.HTTP_201_CREATED)
async def book(booking: AppointmentCreate, user: ClientAreaUserDep, store: StoreDep):
    """Book a service for the current user.

    The barber and service ids are not checked; unknown ones show up as
    "Unknown ..." names.
    """
    appointment = await store.record_appointment(
        client_id=user.id,
        barber_id=booking.barber_id,
        service_id=booking.service_id,
        date=booking.date,
    )
    return AppointmentDetail.from_appointment(appointment, store)


@router.get("/me", response_model=list[AppointmentDetail])
async def my_appointments(user: ClientAreaUserDep, store: StoreDep):
    """The current user's bookings, newest first."""
    return [
        AppointmentDetail.from_appointment(appointment, store)
        for appointment in store.appointments_for_client(user.id)
    ]


@router.post(
    "/{appointment_id}/rating",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        **CommonResponses.BAD_REQUEST,
        **CommonResponses.NOT_FOUND,
        **CommonResponses.CONFLICT,
    },
)
async def rate(
    appointment_id: str,
    rating: RatingRequest,
    user: ClientAreaUserDep,
    store: StoreDep,
):
    """Rate one of the current user's completed appointments.

    A rating already given may be replaced by its author.
    """
    appointment = store.get_appointment(appointment_id)
    if appointment is None:
        raise AppointmentNotFoundError()
    if appointment.client_id != user.id:
        raise NotAppointmentOwnerError()
    if appointment.status != AppointmentStatus.completed:
        raise AppointmentNotCompletedError()
    await store.rate_appointment(appointment_id, rating.rating, rating.review)

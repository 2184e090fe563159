"""Admin domain router.

Barber approval, account moderation and the appointment overview.
Admin only.
"""

from fastapi import APIRouter, Depends, status

from barberbook.appointment.schemas import AppointmentDetail, StatusUpdate
from barberbook.auth.access import Area
from barberbook.auth.dependencies import require_area
from barberbook.core.constants import CommonResponses, Routes
from barberbook.core.deps import StoreDep
from barberbook.user.schemas import ModerationUpdate, UserRead

router = APIRouter(
    prefix=Routes.ADMIN.prefix,
    tags=[Routes.ADMIN.tag],
    dependencies=[Depends(require_area(Area.admin))],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
    },
)


@router.get("/users", response_model=list[UserRead])
async def list_users(store: StoreDep):
    """All non-admin accounts."""
    return store.moderatable_users()


@router.get("/users/pending", response_model=list[UserRead])
async def list_pending(store: StoreDep):
    """Barbers waiting for approval."""
    return store.pending_barbers()


@router.patch("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def moderate_user(user_id: str, update: ModerationUpdate, store: StoreDep):
    """Ban/unban or approve a user. Unknown ids change nothing."""
    await store.set_user_moderation_flags(
        user_id, is_banned=update.is_banned, is_approved=update.is_approved
    )


@router.get("/appointments", response_model=list[AppointmentDetail])
async def list_appointments(store: StoreDep):
    return [
        AppointmentDetail.from_appointment(appointment, store)
        for appointment in store.appointments()
    ]


@router.patch(
    "/appointments/{appointment_id}/status",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**CommonResponses.BAD_REQUEST},
)
async def set_status(appointment_id: str, update: StatusUpdate, store: StoreDep):
    """Mark an appointment Completed or Cancelled. Unknown ids change nothing."""
    await store.set_appointment_status(appointment_id, update.status)

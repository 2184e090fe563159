"""Appointment domain exceptions."""

from barberbook.appointment.models import MAX_RATING, MIN_RATING
from barberbook.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class InvalidRatingError(ValidationError):
    """Raised when a rating falls outside the star range."""

    error_type = "invalid_rating"

    def __init__(
        self, message: str = f"Rating must be between {MIN_RATING} and {MAX_RATING}"
    ):
        super().__init__(message)


class AppointmentNotFoundError(NotFoundError):
    error_type = "appointment_not_found"

    def __init__(self, message: str = "Appointment not found"):
        super().__init__(message)


class NotAppointmentOwnerError(AuthorizationError):
    """Raised when a user acts on an appointment booked by someone else."""

    error_type = "not_appointment_owner"

    def __init__(self, message: str = "You can only rate your own appointments."):
        super().__init__(message)


class AppointmentNotCompletedError(ConflictError):
    """Raised when rating an appointment that has not taken place."""

    error_type = "appointment_not_completed"

    def __init__(self, message: str = "Only completed appointments can be rated."):
        super().__init__(message)

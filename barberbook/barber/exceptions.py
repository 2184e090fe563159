"""Barber domain exceptions."""

from barberbook.core.exceptions import NotFoundError


class BarberNotFoundError(NotFoundError):
    """Raised when an id does not belong to a barber with a profile."""

    error_type = "barber_not_found"

    def __init__(self, message: str = "Barber not found"):
        super().__init__(message)

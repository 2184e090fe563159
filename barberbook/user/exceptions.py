"""User domain exceptions."""

from barberbook.core.exceptions import ConflictError


class EmailExistsError(ConflictError):
    """Raised when attempting to register with an existing email."""

    error_type = "email_exists"

    def __init__(self, message: str = "An account with this email already exists."):
        super().__init__(message)

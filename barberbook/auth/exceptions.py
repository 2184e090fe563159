"""Auth domain exceptions.

Authentication and authorization related exceptions. Messages are shown
to end users as-is.
"""

from barberbook.core.exceptions import AuthenticationError, AuthorizationError


class InvalidCredentialsError(AuthenticationError):
    """Raised when email/password combination is invalid."""

    error_type = "invalid_credentials"

    def __init__(self, message: str = "Invalid email or password."):
        super().__init__(message)


class NotAuthenticatedError(AuthenticationError):
    """Raised when a protected area is reached without a session."""

    error_type = "not_authenticated"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class AccountBannedError(AuthorizationError):
    """Raised when a banned account tries to log in."""

    error_type = "account_banned"

    def __init__(self, message: str = "This account has been banned."):
        super().__init__(message)


class PendingApprovalError(AuthorizationError):
    """Raised when a barber logs in before an administrator approved them."""

    error_type = "pending_approval"

    def __init__(
        self,
        message: str = "Your account is pending approval by an administrator.",
    ):
        super().__init__(message)


class RoleRequiredError(AuthorizationError):
    """Raised when the current user's role may not reach an area."""

    error_type = "role_required"

    def __init__(self, message: str = "Your role cannot access this area"):
        super().__init__(message)

"""User domain models.

Users live in the in-memory domain store; these are plain SQLModel data
models (no table).
"""

import uuid
from enum import Enum

from sqlmodel import Field, SQLModel


class Role(str, Enum):
    """User role, fixed at registration.

    - Client: books and rates appointments
    - Barber: owns a barber profile, needs admin approval to log in
    - Admin: approves barbers and moderates accounts
    """

    client = "Client"
    barber = "Barber"
    admin = "Admin"


def new_user_id() -> str:
    return f"user-{uuid.uuid4().hex}"


class User(SQLModel):
    """Domain user.

    Note: password is stored and compared in plaintext. It must never be
    exposed in API responses.
    """

    id: str = Field(default_factory=new_user_id)
    name: str
    email: str
    password: str
    role: Role
    is_banned: bool = Field(default=False)
    is_approved: bool = Field(default=True)

    @property
    def is_pending(self) -> bool:
        """Barber still waiting for administrator approval."""
        return self.role == Role.barber and not self.is_approved

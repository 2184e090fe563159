"""User domain schemas.

Request and response schemas for user operations.

Security notes:
- password is never part of a response schema
- ModerationUpdate only carries the two admin-controlled flags; role is
  fixed at registration
"""

from sqlmodel import SQLModel

from barberbook.user.models import Role


class UserRead(SQLModel):
    """Response schema for user data. Excludes password."""

    id: str
    name: str
    email: str
    role: Role
    is_banned: bool
    is_approved: bool


class ModerationUpdate(SQLModel):
    """Schema for an admin banning/unbanning or approving a user."""

    is_banned: bool | None = None
    is_approved: bool | None = None

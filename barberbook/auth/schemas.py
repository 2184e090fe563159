"""Auth domain schemas.

Request and response schemas for authentication operations.
"""

from pydantic import BaseModel, Field

from barberbook.auth.access import Area
from barberbook.user.models import Role
from barberbook.user.schemas import UserRead


class AuthRegister(BaseModel):
    """Request schema for user registration."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    role: Role = Role.client


class EmailPasswordLoginRequest(BaseModel):
    """Request schema for email/password login."""

    email: str
    password: str


class AuthSession(BaseModel):
    """Response schema for the current session."""

    user: UserRead
    home: Area


class AuthMessage(BaseModel):
    """Generic message response."""

    message: str

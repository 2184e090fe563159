"""Auth domain router.

Thin HTTP handlers for registration, login, logout and the current
session. All rules live in the domain store.

There is one session for the whole application, not one per caller:
logging in replaces the current user for every client of the API and
logging out ends it for everyone.
"""

from fastapi import APIRouter, status

from barberbook.auth.access import home_area
from barberbook.auth.dependencies import CurrentUserDep
from barberbook.auth.schemas import (
    AuthMessage,
    AuthRegister,
    AuthSession,
    EmailPasswordLoginRequest,
)
from barberbook.core.constants import CommonResponses, Routes
from barberbook.core.deps import StoreDep
from barberbook.user.models import Role
from barberbook.user.schemas import UserRead

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.BAD_REQUEST},
)


@router.post(
    "/register",
    response_model=AuthMessage,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.CONFLICT},
)
async def register(register_data: AuthRegister, store: StoreDep):
    """Register a new account.

    Does not log in. Barbers must wait for an administrator's approval.
    """
    await store.register_user(
        register_data.name,
        register_data.email,
        register_data.password,
        register_data.role,
    )
    if register_data.role == Role.barber:
        return AuthMessage(
            message="Registration successful! Your account is pending approval."
        )
    return AuthMessage(message="Registration successful! Please log in.")


@router.post(
    "/login",
    response_model=AuthSession,
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.FORBIDDEN},
)
async def login(login_data: EmailPasswordLoginRequest, store: StoreDep):
    """Log in with email and password and start the session."""
    user = await store.authenticate(login_data.email, login_data.password)
    return AuthSession(user=UserRead.model_validate(user), home=home_area(user))


@router.post("/logout", response_model=AuthMessage)
async def logout(store: StoreDep):
    """End the current session. Succeeds even when nobody is logged in."""
    store.end_session()
    return AuthMessage(message="Logged out")


@router.get(
    "/me",
    response_model=AuthSession,
    responses={**CommonResponses.UNAUTHORIZED},
)
async def me(user: CurrentUserDep):
    """Return the user of the current session."""
    return AuthSession(user=UserRead.model_validate(user), home=home_area(user))

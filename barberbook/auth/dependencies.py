"""Auth domain dependencies.

Session and role-gate dependencies for FastAPI routes, plus type aliases
for authenticated user injection.
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends

from barberbook.auth.access import Area, can_access
from barberbook.auth.exceptions import NotAuthenticatedError, RoleRequiredError
from barberbook.core.deps import StoreDep
from barberbook.user.models import User


def get_current_user(store: StoreDep) -> User:
    """Return the user of the current session.

    Raises:
        NotAuthenticatedError: If nobody is logged in
    """
    user = store.current_user
    if user is None:
        raise NotAuthenticatedError()
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


def require_area(area: Area) -> Callable[[User], User]:
    """Build a dependency that admits only roles allowed in ``area``.

    Use as a router-level dependency:
        router = APIRouter(dependencies=[Depends(require_area(Area.admin))])
    """

    def dependency(user: CurrentUserDep) -> User:
        if not can_access(user, area):
            raise RoleRequiredError()
        return user

    return dependency


BarberUserDep = Annotated[User, Depends(require_area(Area.barber_dashboard))]
ClientAreaUserDep = Annotated[User, Depends(require_area(Area.client))]

"""Role-gated areas of the application.

Which roles may reach which area. Kept free of FastAPI so the rules can be
checked directly.
"""

from enum import Enum

from barberbook.user.models import Role, User


class Area(str, Enum):
    admin = "admin"
    barber_dashboard = "barber_dashboard"
    # Discovery, booking, own appointments and public barber profiles.
    client = "client"


AREA_ROLES: dict[Area, frozenset[Role]] = {
    Area.admin: frozenset({Role.admin}),
    Area.barber_dashboard: frozenset({Role.barber}),
    Area.client: frozenset({Role.client, Role.barber}),
}


def can_access(user: User | None, area: Area) -> bool:
    """Whether ``user`` may enter ``area``. Anonymous users never may."""
    if user is None:
        return False
    return user.role in AREA_ROLES[area]


def home_area(user: User) -> Area:
    """Landing area after login."""
    if user.role == Role.admin:
        return Area.admin
    if user.role == Role.barber:
        return Area.barber_dashboard
    return Area.client

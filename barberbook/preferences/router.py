"""Preferences router.

Theme preference; available without a session.
"""

from fastapi import APIRouter

from barberbook.core.constants import Routes
from barberbook.core.deps import StoreDep
from barberbook.preferences.models import ThemeRead

router = APIRouter(prefix=Routes.PREFERENCES.prefix, tags=[Routes.PREFERENCES.tag])


@router.get("/theme", response_model=ThemeRead)
async def get_theme(store: StoreDep):
    return ThemeRead(theme=store.theme)


@router.post("/theme/toggle", response_model=ThemeRead)
async def toggle_theme(store: StoreDep):
    """Switch between light and dark; the choice survives restarts."""
    return ThemeRead(theme=store.toggle_theme())

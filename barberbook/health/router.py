"""Health domain router.

Health check endpoint for monitoring.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from barberbook.core.constants import Routes
from barberbook.core.deps import SessionDep, StoreDep

router = APIRouter(prefix=Routes.HEALTH.prefix, tags=[Routes.HEALTH.tag])


@router.get("")
async def health(session: SessionDep, store: StoreDep):
    """Health check with persistence connectivity verification."""
    counts = {
        "users": len(store.users()),
        "barber_profiles": len(store.barber_profiles()),
        "appointments": len(store.appointments()),
    }
    try:
        session.exec(text("SELECT 1"))
        return {"status": "ok", "database": "ok", "store": counts}
    except Exception:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "error", "store": counts},
        )

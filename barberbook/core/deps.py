"""Centralized dependency type aliases for FastAPI routes.

Import dependencies from this single module:
    from barberbook.core.deps import SessionDep, StoreDep
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from barberbook.db.engine import get_session
from barberbook.store.store import DomainStore


def get_store(request: Request) -> DomainStore:
    """Return the domain store built once at startup."""
    return request.app.state.store


# Persistence session
SessionDep = Annotated[Session, Depends(get_session)]

# Domain store
StoreDep = Annotated[DomainStore, Depends(get_store)]

"""BarberBook API application.

The domain store keeps a single session pointer, as the booking app it
backs did. The API therefore serves one session at a time: every caller
acts as whoever logged in last, and a login replaces the previous session
for all callers.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from barberbook.core.cors import add_cors_middleware
from barberbook.core.exception_handlers import register_exception_handlers
from barberbook.core.logging import configure_logging
from barberbook.core.request_logging import add_request_logging_middleware
from barberbook.core.settings import Settings, get_settings
from barberbook.db.engine import create_db_engine
from barberbook.db.slots import SlotStore
from barberbook.router import api_router
from barberbook.store.store import DomainStore

configure_logging()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; the store is constructed once per lifespan."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = create_db_engine(settings.database_url)
        app.state.engine = engine
        app.state.store = DomainStore.from_settings(settings, SlotStore(engine))
        yield
        engine.dispose()

    app = FastAPI(title="BarberBook", version="0.1.0", lifespan=lifespan)
    app.include_router(api_router)

    add_request_logging_middleware(app)
    add_cors_middleware(app, settings)
    register_exception_handlers(app)
    return app


app = create_app()

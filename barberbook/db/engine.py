from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool


def create_db_engine(database_url: str) -> Engine:
    """Create the engine backing the persistence slots and create its tables."""
    # Registers table models on SQLModel.metadata.
    import barberbook.models  # noqa: F401

    connect_args: dict[str, object] = {}
    kwargs: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        # Required for SQLite when used with FastAPI across threads.
        connect_args = {"check_same_thread": False}
        if database_url in {"sqlite://", "sqlite:///:memory:"}:
            # A single shared connection keeps an in-memory database alive.
            kwargs["poolclass"] = StaticPool

    engine = create_engine(
        database_url, echo=False, connect_args=connect_args, **kwargs
    )
    SQLModel.metadata.create_all(engine)
    return engine


def get_session(request: Request) -> Generator[Session, None, None]:
    with Session(request.app.state.engine) as session:
        yield session

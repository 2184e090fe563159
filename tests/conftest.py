import inspect
from collections.abc import Callable, Iterator

import anyio
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine

from barberbook.core.settings import Settings
from barberbook.db.engine import create_db_engine
from barberbook.db.slots import SlotStore
from barberbook.main import create_app
from barberbook.store.seed import (
    SEED_PASSWORD,
    seed_appointments,
    seed_profiles,
    seed_users,
)
from barberbook.store.store import DomainStore


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(name="engine")
def engine_fixture() -> Iterator[Engine]:
    """In-memory SQLite database for the persistence slots."""
    engine = create_db_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture(name="slots")
def slots_fixture(engine: Engine) -> SlotStore:
    return SlotStore(engine)


@pytest.fixture(name="store")
def store_fixture(slots: SlotStore) -> DomainStore:
    """Seeded store without simulated latency."""
    return DomainStore(
        seed_users(),
        seed_profiles(),
        seed_appointments(),
        slots=slots,
        latency=0,
        short_latency=0,
    )


@pytest.fixture(name="empty_store")
def empty_store_fixture() -> DomainStore:
    return DomainStore(latency=0, short_latency=0)


@pytest.fixture(name="mock_settings")
def mock_settings_fixture() -> Settings:
    """Settings for an in-memory, zero-latency application."""
    return Settings(
        _env_file=None,
        ENV_NAME="test",
        DATABASE_URL="sqlite://",
        STORE_LATENCY_MS=0,
        STORE_SHORT_LATENCY_MS=0,
        SEED_DATA=True,
    )


@pytest.fixture(name="client")
def client_fixture(mock_settings: Settings) -> Iterator[TestClient]:
    """Test client over a freshly seeded application, nobody logged in."""
    app = create_app(mock_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture(name="login")
def login_fixture(client: TestClient) -> Callable[[str], TestClient]:
    """Log a seeded user in on ``client`` and return it."""

    def _login(email: str, password: str = SEED_PASSWORD) -> TestClient:
        response = client.post(
            "/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return client

    return _login


@pytest.fixture(name="client_client")
def client_client_fixture(login) -> TestClient:
    return login("john@email.com")


@pytest.fixture(name="barber_client")
def barber_client_fixture(login) -> TestClient:
    return login("edward@barberbook.com")


@pytest.fixture(name="admin_client")
def admin_client_fixture(login) -> TestClient:
    return login("admin@.com")

"""
Dating Admin API Tests - Test Configuration.

Provides a fixed clock, a freshly seeded store per test, an empty
store, and an HTTP client bound to an application that serves the
per-test store.
"""

import os

os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from dating_admin_api.app.core.config import Settings  # noqa: E402
from dating_admin_api.app.core.seed import build_store  # noqa: E402
from dating_admin_api.app.core.store import MemStore  # noqa: E402
from dating_admin_api.app.main import create_app  # noqa: E402


FIXED_NOW = datetime(2025, 3, 14, 12, 0, tzinfo=timezone.utc)
ADMIN_EMAIL = "ops@loveadmin.test"
ADMIN_PASSWORD = "correct horse battery staple"


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(FIXED_NOW)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known administrator and sample data enabled."""
    return Settings(
        admin_name="Ops Admin",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        admin_password_hash="",
        seed_sample_data=True,
        stats_timezone="UTC",
        api_key_header="X-API-Key",
        log_level="WARNING",
        log_file="",
    )


@pytest.fixture
def store(test_settings: Settings, clock: FakeClock) -> MemStore:
    """A store seeded with the administrator and the demo dataset."""
    seeded = build_store(test_settings, clock=clock)
    yield seeded
    seeded.close()


@pytest.fixture
def empty_store(clock: FakeClock) -> MemStore:
    return MemStore(clock=clock)


@pytest.fixture
def app(store: MemStore, test_settings: Settings):
    return create_app(store=store, settings=test_settings)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client

"""Shared test fixtures for the async database, sessions and resolver collaborators."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from pet_tracker.core.config import Settings
from pet_tracker.core.metrics import SightingMetrics
from pet_tracker.lib.geocoder.base import BaseReverseGeocoder, ReverseGeocodeResult
from pet_tracker.models.base import Base


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        positionstack_api_key="test-api-key",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory async SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def async_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create a per-test async session."""
    session_factory = async_sessionmaker(async_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def metrics() -> SightingMetrics:
    """Metrics sink on a private registry."""
    return SightingMetrics()


@pytest.fixture
def sao_paulo_place() -> ReverseGeocodeResult:
    """Provider result for Avenida Paulista, São Paulo."""
    return ReverseGeocodeResult(
        latitude=-23.5505,
        longitude=-46.6333,
        type="street",
        name="Avenida Paulista",
        street="Avenida Paulista",
        locality="São Paulo",
        neighbourhood="Centro",
        administrative_area="São Paulo",
        region="São Paulo",
        country="Brasil",
        country_code="BRA",
    )


@pytest.fixture
def geocoder(sao_paulo_place: ReverseGeocodeResult) -> AsyncMock:
    """Reverse geocoder mock answering with the São Paulo place."""
    mock = AsyncMock(spec=BaseReverseGeocoder)
    mock.provider_name = "mock"
    mock.is_configured = True
    mock.reverse.return_value = sao_paulo_place
    return mock

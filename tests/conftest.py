"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.wallet.api.router import get_wallet_service


@pytest.fixture
def wallet_service() -> AsyncMock:
    """Mock WalletApplicationService injected in place of the lifespan one."""
    return AsyncMock()


@pytest.fixture
async def client(wallet_service: AsyncMock) -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints (no lifespan, no DB)."""
    app.dependency_overrides[get_wallet_service] = lambda: wallet_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_wallet_service, None)

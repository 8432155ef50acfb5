"""Integration-test fixtures.

Requires a reachable PostgreSQL at DATABASE_URL; the whole integration suite
is skipped when it is not. The app lifespan runs for the session, so
migrations are applied and the real WalletApplicationService is wired up.

All integration tests share a single event loop so the engine pool created
by the lifespan stays valid across the session.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from config.settings import settings
from src.main import app


async def _database_reachable() -> str | None:
    engine = create_async_engine(settings.DATABASE_URL)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (OSError, SQLAlchemyError) as exc:
        return str(exc)
    finally:
        await engine.dispose()
    return None


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def client() -> AsyncClient:  # type: ignore[override]
    """Session-scoped async HTTP client running the real lifespan."""
    reason = await _database_reachable()
    if reason is not None:
        pytest.skip(f"PostgreSQL not reachable at DATABASE_URL: {reason}")

    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test DB session
    - db_sessions records every session the app opens, so tests can assert
      that rejected requests never reached the store
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.database import get_db
from app.main import app


@pytest.fixture
def db_sessions():
    """Sessions opened by the app during the test."""
    return []


@pytest.fixture
async def client(test_session_factory, db_sessions):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            db_sessions.append(session)
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()

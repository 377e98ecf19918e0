"""Shared fixtures: an app wired to an in-memory SQLite database and an async HTTP client."""

import httpx
import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.db.base import Base
from app.main import create_application
from app.models import *  # noqa: F401, F403 - register all models

API = "/api/v1"


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def app(engine):
    settings = Settings(_env_file=None, database_url_override="sqlite+aiosqlite://")
    return create_application(settings=settings, engine=engine)


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def create_exercise(client):
    """POST an exercise and return its JSON."""

    async def _create(name="Bench Press", met=6.0, input_type="reps_weight", muscle_group="chest"):
        resp = await client.post(
            f"{API}/exercises",
            json={"name": name, "met": met, "input_type": input_type, "muscle_group": muscle_group},
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create


@pytest.fixture
def create_session(client):
    """POST a session and return its JSON."""

    async def _create(body_weight_kg=70.0, session_date="2026-10-19", note=None):
        resp = await client.post(
            f"{API}/sessions",
            json={"session_date": session_date, "body_weight_kg": body_weight_kg, "note": note},
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create

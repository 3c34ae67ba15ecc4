"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - app.state.db points at the test engine for the duration of a test
    - Rate-limit counters are cleared before each test

Design Decisions:
    - StaticPool: every session shares the one in-memory connection
    - build_engine() from the app: tests run with the same pragmas and
      JSON encoding as production
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from cynova.db.base import Base
from cynova.infrastructure.database import DatabaseSessionManager, build_engine
from cynova.infrastructure.rate_limit import reset_rate_limits
from cynova.main import app


@pytest.fixture
async def test_engine():
    engine = build_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine):
    """FastAPI test client wired to the test database."""
    original_manager = getattr(app.state, "db", None)
    app.state.db = DatabaseSessionManager.from_engine(test_engine)
    reset_rate_limits()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db = original_manager


@pytest.fixture
def product_payload():
    return {
        "nom": "Savon au Miel",
        "description": "Savon artisanal au miel bio pour peau sensible",
        "prix": 8.90,
        "categorie": "savon",
        "stock": 15,
    }


@pytest.fixture
def blog_payload():
    return {
        "titre": "Les bienfaits de l'aloe vera",
        "contenu": (
            "L'aloe vera est une plante aux multiples vertus, utilisée depuis "
            "des siècles pour hydrater et apaiser la peau."
        ),
        "categorie": "ingrédients",
    }


@pytest.fixture
def user_payload():
    return {
        "email": "marie@example.com",
        "motDePasse": "motdepasse123",
        "nom": "Dubois",
        "prenom": "Marie",
    }

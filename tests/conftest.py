"""Test fixtures — in-memory SQLite per test, settings injected via overrides.

Learn: Testing pattern for async SQLAlchemy + FastAPI:

1. Each test gets a fresh in-memory SQLite engine (aiosqlite). StaticPool
   keeps a single connection so every session sees the same database.
2. Tables are created from the ORM metadata, so no migrations are needed.
3. The app's get_db and get_settings dependencies are overridden, which
   gives every test a known admin account and signing secret.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from unievents.auth.identity import ADMIN_SENTINEL, Identity
from unievents.auth.jwt import TokenIssuer
from unievents.auth.password import hash_password
from unievents.config import Settings, get_settings
from unievents.db.engine import get_db
from unievents.db.models import Base, Event, User, Venue
from unievents.main import app

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_EMAIL = "Events.Admin@uni.edu"
ADMIN_PASSWORD = "env-admin-secret"


@pytest.fixture()
def test_settings():
    return Settings(
        jwt_secret="test-signing-secret",
        jwt_expires_in="1h",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture()
def issuer(test_settings):
    return TokenIssuer.from_settings(test_settings)


@pytest_asyncio.fixture()
async def db_session():
    """Fresh in-memory database with all tables created."""
    engine = create_async_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
    await engine.dispose()


@pytest_asyncio.fixture()
async def client(db_session, test_settings):
    """HTTP client with the app's get_db and get_settings overridden."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture()
async def make_user(db_session):
    """Factory: insert a stored user and return it."""

    async def _make(
        email: str = "student@uni.edu",
        password: str = "student-pass",
        role: str = "student",
        **extra,
    ) -> User:
        user = User(
            email=email.lower(),
            username=extra.pop("username", email.split("@")[0]),
            first_name=extra.pop("first_name", "Test"),
            last_name=extra.pop("last_name", "User"),
            role=role,
            # Low work factor keeps the suite fast.
            password_hash=hash_password(password, rounds=4),
            **extra,
        )
        db_session.add(user)
        await db_session.commit()
        return user

    return _make


@pytest_asyncio.fixture()
async def make_venue(db_session):
    async def _make(name: str = "Main Auditorium", **extra) -> Venue:
        venue = Venue(name=name, **extra)
        db_session.add(venue)
        await db_session.commit()
        return venue

    return _make


@pytest_asyncio.fixture()
async def make_event(db_session):
    async def _make(title: str = "Hackathon", **extra) -> Event:
        event = Event(title=title, **extra)
        db_session.add(event)
        await db_session.commit()
        return event

    return _make


@pytest.fixture()
def admin_identity():
    return Identity(
        id=ADMIN_SENTINEL,
        username="admin",
        email=ADMIN_EMAIL,
        first_name="Admin",
        last_name="User",
        role="admin",
    )


@pytest.fixture()
def auth_headers(issuer):
    """Build a bearer header for a stored user or an Identity."""

    def _headers(who) -> dict:
        identity = who if isinstance(who, Identity) else Identity.from_user(who)
        return {"Authorization": f"Bearer {issuer.issue(identity)}"}

    return _headers

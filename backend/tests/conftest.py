"""Shared test fixtures: in-memory SQLite, seeded data and API clients."""

import os

# Must be set before launchwatch.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from launchwatch.core.security import Identity
from launchwatch.db.base import Base
from launchwatch.db.session import SessionLocal, engine
from launchwatch.models import Launch, User
from launchwatch.services.seed import seed_demo_data

# Fixed seed time (epoch ms) so backdated offsets are deterministic
SEED_TIME = 1_760_000_000_000


@pytest.fixture(autouse=True)
def schema():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db):
    """Seed demo data at SEED_TIME and return launches keyed by name."""
    seed_demo_data(db, now=SEED_TIME)
    return {launch.name: launch for launch in db.query(Launch).all()}


@pytest.fixture
def make_identity(db):
    """Create a user row and return its Identity. email=None makes a guest."""

    def _make(email="astronaut@spacex.com"):
        user = User(email=email, is_anonymous=email is None)
        db.add(user)
        db.commit()
        return Identity(user_id=user.id, email=user.email)

    return _make


@pytest.fixture
def client():
    from launchwatch.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    """Register an account through the API and return bearer headers."""

    def _register(email="astronaut@spacex.com", password="hunter22"):
        resp = client.post("/api/v1/auth/register", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _register

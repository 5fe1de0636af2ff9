"""Shared test configuration — in-memory SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session
    - Users 5 (eve) and 7 (grace) and category 1 (Puns) always exist
"""

import os

# Settings are read at import time; never touch a real database in tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import hash_password
from app.db.session import enable_sqlite_foreign_keys, get_db
from app.main import app
from app.models import Base, Category, User
from app.services.auth_service import create_access_token
from app.services.joke_store import JokeStore


TEST_PASSWORD = "secret-password"


@pytest.fixture
def test_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="session")
def password_hash():
    return hash_password(TEST_PASSWORD)


@pytest.fixture
def db(test_session_factory, password_hash):
    session = test_session_factory()
    session.add_all([
        User(id=5, name="eve", password_hash=password_hash),
        User(id=7, name="grace", password_hash=password_hash),
        Category(id=1, label="Puns"),
        Category(id=2, label="Programming"),
    ])
    session.commit()
    yield session
    session.close()


@pytest.fixture
def store(db):
    return JokeStore(db)


@pytest.fixture
def client(db, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    def override_get_db():
        session = test_session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(user_id: int) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def eve_headers():
    return auth_headers(5)


@pytest.fixture
def grace_headers():
    return auth_headers(7)

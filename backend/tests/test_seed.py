"""Tests for the seed loader."""

from app.core.security import verify_password
from app.db.seed import DEFAULT_CATEGORIES, DEFAULT_USERS, seed_database
from app.models import Category, User


def test_seed_adds_missing_rows(test_session_factory):
    db = test_session_factory()
    try:
        stats = seed_database(db, password="pw")

        assert stats == {"categories": len(DEFAULT_CATEGORIES), "users": len(DEFAULT_USERS)}
        alice = db.query(User).filter(User.name == "alice").one()
        assert verify_password("pw", alice.password_hash)
    finally:
        db.close()


def test_seed_is_idempotent(test_session_factory):
    db = test_session_factory()
    try:
        seed_database(db, password="pw")
        assert seed_database(db, password="pw") == {"categories": 0, "users": 0}
        assert db.query(Category).count() == len(DEFAULT_CATEGORIES)
    finally:
        db.close()

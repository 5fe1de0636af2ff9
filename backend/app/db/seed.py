"""
Database Seeding Script
Provisions the users and categories the joke endpoints rely on.

Jokes reference both a category and an author, and neither can be created
through the API, so a fresh database needs this seed before it is usable.
Seeding is idempotent: rows that already exist (same user name or category
label) are skipped.

Usage:
    # From backend directory
    python -m app.db.seed
"""

import logging
import sys

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import hash_password
from app.db.session import SessionLocal, engine
from app.models import Base
from app.models.category import Category
from app.models.user import User


logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    "Dad jokes",
    "Programming",
    "Puns",
    "One-liners",
    "Knock-knock",
]

DEFAULT_USERS = [
    "alice",
    "bob",
    "carol",
    "dave",
]


def seed_categories(db: Session, labels=DEFAULT_CATEGORIES) -> int:
    """Insert missing categories. Returns the number added."""
    existing = {label for (label,) in db.query(Category.label).all()}
    added = 0
    for label in labels:
        if label not in existing:
            db.add(Category(label=label))
            added += 1
    return added


def seed_users(db: Session, password: str, names=DEFAULT_USERS) -> int:
    """Insert missing users, all with the same password. Returns the number added."""
    existing = {name for (name,) in db.query(User.name).all()}
    missing = [name for name in names if name not in existing]
    if not missing:
        return 0
    password_hash = hash_password(password)
    for name in missing:
        db.add(User(name=name, password_hash=password_hash))
    return len(missing)


def seed_database(db: Session, password: str = None) -> dict:
    """
    Seed categories and users in one commit.

    Returns:
        dict with the number of categories and users added
    """
    try:
        stats = {
            "categories": seed_categories(db),
            "users": seed_users(db, password or settings.SEED_USER_PASSWORD),
        }
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Seeded {stats['categories']} categories and {stats['users']} users")
    return stats


def main():
    """Create tables and seed them."""
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        stats = seed_database(db)
    finally:
        db.close()

    print(f"✓ Categories added: {stats['categories']}")
    print(f"✓ Users added: {stats['users']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

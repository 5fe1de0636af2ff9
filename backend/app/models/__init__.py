"""
Database Models Module
Contains SQLAlchemy ORM models for all database tables.

All models must be imported here to be registered with SQLAlchemy
and created during Base.metadata.create_all().
"""

from app.db.base import Base
from app.models.base import BaseModel
from app.models.user import User
from app.models.category import Category
from app.models.joke import Joke
from app.models.comment import Comment
from app.models.rating import Rating

# Export all models so they can be imported from app.models
# This also ensures they are registered with SQLAlchemy Base
__all__ = [
    "Base",
    "BaseModel",
    "User",
    "Category",
    "Joke",
    "Comment",
    "Rating",
]

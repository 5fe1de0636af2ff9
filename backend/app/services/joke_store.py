"""
Joke Store
Data access gateway for jokes, users, comments, ratings and categories.

Each record kind is exposed as a RecordCollection with the same five
operations (find_all, find_one, create, update, delete), all filtering by
column equality. There are no joins here: relations are resolved by the
aggregation helpers. Storage errors propagate unchanged to the caller after
the session has been rolled back.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.comment import Comment
from app.models.joke import Joke
from app.models.rating import Rating
from app.models.user import User


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class RecordNotFoundError(LookupError):
    """A lookup that must succeed found no matching row."""


class RecordCollection(Generic[ModelT]):
    """
    Filter-based CRUD over a single table.

    Filters are keyword arguments naming model columns, e.g.
    ``collection.find_one(id=3)`` or ``collection.find_all(joke_id=3)``.
    """

    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model

    def _query(self, filters: Dict[str, Any]):
        query = self.db.query(self.model)
        if filters:
            query = query.filter_by(**filters)
        return query

    def find_all(self, **filters) -> List[ModelT]:
        """Return every matching row in insertion (id) order."""
        return self._query(filters).order_by(self.model.id).all()

    def find_one(self, **filters) -> Optional[ModelT]:
        """Return the first matching row, or None."""
        return self._query(filters).order_by(self.model.id).first()

    def create(self, **values) -> ModelT:
        """Insert a row and return it with its generated id."""
        record = self.model(**values)
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        logger.debug(f"Created {record!r}")
        return record

    def update(self, values: Dict[str, Any], **filters) -> int:
        """Apply values to every matching row. Returns the number of rows updated."""
        records = self._query(filters).all()
        for record in records:
            for field, value in values.items():
                setattr(record, field, value)
        self._commit()
        return len(records)

    def delete(self, **filters) -> int:
        """
        Delete every matching row. Returns the number of rows deleted.

        Rows are deleted one by one through the session so ORM cascades
        (a joke's ratings and comments) are applied.
        """
        records = self._query(filters).all()
        for record in records:
            self.db.delete(record)
        self._commit()
        return len(records)

    def _commit(self):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise


class JokeStore:
    """
    Gateway over one database session.

    Usage:
        store = JokeStore(db)
        joke = store.jokes.find_one(id=joke_id)
        ratings = store.ratings.find_all(joke_id=joke_id)
    """

    def __init__(self, db: Session):
        self.db = db
        self.jokes: RecordCollection[Joke] = RecordCollection(db, Joke)
        self.users: RecordCollection[User] = RecordCollection(db, User)
        self.comments: RecordCollection[Comment] = RecordCollection(db, Comment)
        self.ratings: RecordCollection[Rating] = RecordCollection(db, Rating)
        self.categories: RecordCollection[Category] = RecordCollection(db, Category)

    def sample_one(self) -> Optional[Joke]:
        """
        Return one joke picked at random by the database engine, or None
        when there are no jokes.
        """
        return self.db.query(Joke).order_by(func.random()).first()

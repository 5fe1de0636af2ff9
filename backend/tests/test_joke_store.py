"""Tests for JokeStore — filter-based CRUD against SQLite."""

import pytest
from sqlalchemy.exc import IntegrityError

from app.models import Comment, Joke, Rating


def test_create_returns_generated_id(store):
    joke = store.jokes.create(content="why?", category_id=1, user_id=5)
    assert joke.id is not None
    assert store.jokes.find_one(id=joke.id).content == "why?"


def test_find_all_filters_and_keeps_insertion_order(store):
    first = store.jokes.create(content="a", category_id=1, user_id=5)
    store.jokes.create(content="b", category_id=2, user_id=7)
    third = store.jokes.create(content="c", category_id=1, user_id=7)

    assert [joke.id for joke in store.jokes.find_all(category_id=1)] == [first.id, third.id]
    assert len(store.jokes.find_all()) == 3


def test_find_one_missing_returns_none(store):
    assert store.jokes.find_one(id=123) is None


def test_update_by_filter(store):
    joke = store.jokes.create(content="a", category_id=1, user_id=5)

    assert store.jokes.update({"content": "b"}, id=joke.id) == 1
    assert store.jokes.update({"content": "c"}, id=999) == 0
    assert store.jokes.find_one(id=joke.id).content == "b"


def test_delete_joke_removes_its_ratings_and_comments(store, db):
    joke = store.jokes.create(content="a", category_id=1, user_id=5)
    store.ratings.create(rate=5, user_id=7, joke_id=joke.id)
    store.comments.create(content="ha", user_id=7, joke_id=joke.id)

    assert store.jokes.delete(id=joke.id) == 1

    assert db.query(Joke).count() == 0
    assert db.query(Rating).count() == 0
    assert db.query(Comment).count() == 0


def test_sample_one(store):
    assert store.sample_one() is None

    joke = store.jokes.create(content="only one", category_id=1, user_id=5)
    assert store.sample_one().id == joke.id


def test_sample_one_picks_among_all_jokes(store):
    ids = {store.jokes.create(content=str(i), category_id=1, user_id=5).id for i in range(3)}
    seen = {store.sample_one().id for _ in range(50)}
    assert seen <= ids
    assert len(seen) > 1


def test_foreign_keys_are_enforced(store, db):
    with pytest.raises(IntegrityError):
        store.jokes.create(content="lost", category_id=999, user_id=5)

    # the session was rolled back and stays usable
    assert store.jokes.find_all() == []
    assert db.query(Joke).count() == 0

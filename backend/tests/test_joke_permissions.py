"""Tests for joke ownership rules."""

from types import SimpleNamespace

import pytest

from app.services.joke_permissions import Requester, is_owner, is_self_target


@pytest.mark.parametrize("author_id, requester_id, expected", [
    (5, 5, True),
    (5, 7, False),
    (7, 5, False),
])
def test_is_owner(author_id, requester_id, expected):
    joke = SimpleNamespace(user_id=author_id)
    assert is_owner(joke, Requester(id=requester_id)) is expected


@pytest.mark.parametrize("author_id, requester_id, expected", [
    (5, 5, True),
    (5, 7, False),
])
def test_is_self_target(author_id, requester_id, expected):
    joke = SimpleNamespace(user_id=author_id)
    assert is_self_target(joke, Requester(id=requester_id)) is expected

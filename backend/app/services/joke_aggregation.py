"""
Joke Aggregation
Derived values shown in joke views: average rate, comments and category label.

These helpers only read from the store. Given the same stored rows they
always return the same values.
"""

import statistics
from typing import Dict, List, Optional

from app.services.joke_store import JokeStore, RecordNotFoundError


# Rate shown for a joke nobody has rated yet
EMPTY_RATE = 0


def rate_of(store: JokeStore, joke_id: int) -> float:
    """
    Arithmetic mean of all ratings given to a joke.

    Returns EMPTY_RATE when the joke has no ratings.

    Example:
        ratings 4 and 5 -> 4.5
    """
    rates = [rating.rate for rating in store.ratings.find_all(joke_id=joke_id)]
    if not rates:
        return EMPTY_RATE
    return statistics.fmean(rates)


def comments_of(store: JokeStore, joke_id: int) -> List[Dict[str, Optional[str]]]:
    """
    Comments of a joke in the order they were stored.

    Each entry is ``{"content": <text>, "author": <user name>}``; author is
    None when the commenting user no longer exists.
    """
    comments = []
    for comment in store.comments.find_all(joke_id=joke_id):
        author = store.users.find_one(id=comment.user_id)
        comments.append({
            "content": comment.content,
            "author": author.name if author else None,
        })
    return comments


def category_of(store: JokeStore, category_id: int) -> str:
    """Label of a category. Raises RecordNotFoundError if it does not exist."""
    category = store.categories.find_one(id=category_id)
    if category is None:
        raise RecordNotFoundError(f"Category {category_id} not found")
    return category.label

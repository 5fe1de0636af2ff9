"""
Joke Controller
Request operations on jokes: list, random, get, update, delete, create,
rate and comment.

Every operation returns a ControllerResult (status code + JSON body) and
never raises. Domain failures are raised internally as JokeError subclasses
and turned into ``{"error": message}`` with their status code; any other
exception (database, missing category...) is logged through the error logger
and answered with a generic 500 so storage details never reach the client.

Usage:
    controller = JokeController(JokeStore(db))
    result = controller.rate(joke_id, Requester(id=user.id), rate=4)
    return JSONResponse(status_code=result.status_code, content=result.body)
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Optional

from app.services.error_logging import error_logger
from app.services.joke_aggregation import category_of, comments_of, rate_of
from app.services.joke_permissions import Requester, is_owner, is_self_target
from app.services.joke_store import JokeStore


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Accepted rating scores, inclusive
MIN_RATE = 1
MAX_RATE = 5


@dataclass
class ControllerResult:
    """HTTP status code and JSON-serializable body of an operation."""
    status_code: int
    body: Any


class JokeError(Exception):
    """Expected failure of a joke operation, answered with status_code."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(JokeError):
    status_code = 400


class ForbiddenError(JokeError):
    status_code = 403


class NotFoundError(JokeError):
    status_code = 404


def operation(success_status: int):
    """
    Wrap a controller method so it returns a ControllerResult.

    The method returns only the success body; JokeError becomes an error
    result with its own status, anything else becomes a logged 500.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                body = func(self, *args, **kwargs)
            except JokeError as exc:
                logger.info(f"{func.__name__} rejected ({exc.status_code}): {exc.message}")
                return ControllerResult(exc.status_code, {"error": exc.message})
            except Exception as exc:
                requester = next(
                    (arg for arg in (*args, *kwargs.values()) if isinstance(arg, Requester)),
                    None
                )
                error_logger.log_error(
                    exc,
                    user=requester,
                    context={"operation": func.__name__},
                )
                return ControllerResult(500, {"error": INTERNAL_ERROR_MESSAGE})
            return ControllerResult(success_status, body)
        return wrapper
    return decorator


class JokeController:
    """Joke operations over a JokeStore."""

    def __init__(self, store: JokeStore):
        self.store = store

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def _joke_view(self, joke, with_author: bool = False) -> dict:
        view = {"id": joke.id}
        if with_author:
            author = self.store.users.find_one(id=joke.user_id)
            view["user"] = author.name if author else None
        view.update(
            category=category_of(self.store, joke.category_id),
            content=joke.content,
            rate=rate_of(self.store, joke.id),
            comments=comments_of(self.store, joke.id),
        )
        return view

    def _get_joke(self, joke_id: int, message: str = "Joke not found"):
        joke = self.store.jokes.find_one(id=joke_id)
        if joke is None:
            raise NotFoundError(message)
        return joke

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @operation(200)
    def list_all(self) -> list:
        """Every joke with its author name, category, rate and comments."""
        return [self._joke_view(joke, with_author=True) for joke in self.store.jokes.find_all()]

    @operation(200)
    def random(self) -> dict:
        """One joke chosen by the store. The view has no author field."""
        joke = self.store.sample_one()
        if joke is None:
            raise NotFoundError("No jokes found")
        return self._joke_view(joke)

    @operation(200)
    def get(self, joke_id: int) -> dict:
        return self._joke_view(self._get_joke(joke_id))

    # ------------------------------------------------------------------
    # Author actions
    # ------------------------------------------------------------------

    @operation(200)
    def update(
        self,
        joke_id: int,
        requester: Requester,
        content: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> dict:
        """
        Change the content and/or category of a joke.

        Order of checks: nothing to update (400), unknown joke (404),
        requester is not the author (403).
        """
        if not content and not category_id:
            raise BadRequestError("No content or category to update")
        joke = self._get_joke(joke_id)
        if not is_owner(joke, requester):
            raise ForbiddenError("User doesn't have permission to update this joke")

        values = {}
        if content:
            values["content"] = content
        if category_id:
            values["category_id"] = category_id
        self.store.jokes.update(values, id=joke_id)
        logger.info(f"Joke {joke_id} updated by user {requester.id}")
        return {"message": "Joke updated succesfully"}

    @operation(200)
    def delete(self, joke_id: int, requester: Requester) -> dict:
        joke = self._get_joke(joke_id)
        if not is_owner(joke, requester):
            raise ForbiddenError("User doesn't have permission to delete this joke")
        self.store.jokes.delete(id=joke_id)
        logger.info(f"Joke {joke_id} deleted by user {requester.id}")
        return {"message": "Joke deleted succesfully"}

    @operation(201)
    def create(self, requester: Requester, content: str, category_id: int) -> dict:
        joke = self.store.jokes.create(
            content=content,
            category_id=category_id,
            user_id=requester.id,
        )
        logger.info(f"Joke {joke.id} added by user {requester.id}")
        return {"message": "Joke added succesfully"}

    # ------------------------------------------------------------------
    # Reactions
    # ------------------------------------------------------------------

    @operation(201)
    def rate(self, joke_id: int, requester: Requester, rate: Optional[float] = None) -> dict:
        """
        Rate someone else's joke.

        Rating your own joke is refused whatever the rate value, so the
        missing and out-of-range rate checks come last.
        """
        joke = self._get_joke(joke_id, f"Joke with id {joke_id} not found")
        if is_self_target(joke, requester):
            raise ForbiddenError("You can't rate your own joke")
        if rate is None:
            raise BadRequestError("No rate to add")
        if not MIN_RATE <= rate <= MAX_RATE:
            raise BadRequestError(f"Rate must be between {MIN_RATE} and {MAX_RATE}")
        self.store.ratings.create(rate=rate, user_id=requester.id, joke_id=joke_id)
        return {"message": "Rating added succesfully"}

    @operation(201)
    def comment(self, joke_id: int, requester: Requester, comment: Optional[str] = None) -> dict:
        if not comment or not comment.strip():
            raise BadRequestError("No comment to add")
        self._get_joke(joke_id, f"Joke with id {joke_id} not found")
        self.store.comments.create(content=comment, user_id=requester.id, joke_id=joke_id)
        return {"message": "Comment added succesfully"}

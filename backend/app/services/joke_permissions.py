"""
Joke Permissions
Ownership rules for actions on jokes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Requester:
    """Identity of the authenticated caller of an operation."""
    id: int
    name: str = ""


def is_owner(joke, requester: Requester) -> bool:
    """True iff the requester wrote the joke. Required to update or delete it."""
    return joke.user_id == requester.id


def is_self_target(joke, requester: Requester) -> bool:
    """True iff the requester would be acting on their own joke. Forbids rating it."""
    return joke.user_id == requester.id

"""
Joke Schemas
Pydantic models for joke request bodies and views.

Request fields use camelCase on the wire (``categoryId``); Python code
uses snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class JokeCreate(BaseModel):
    """Schema for creating a joke"""
    content: str = Field(..., description="Joke text")
    category_id: int = Field(..., alias="categoryId", description="Category ID")

    model_config = ConfigDict(populate_by_name=True)


class JokeUpdate(BaseModel):
    """Schema for updating a joke. At least one field must be set."""
    content: Optional[str] = None
    category_id: Optional[int] = Field(None, alias="categoryId")

    model_config = ConfigDict(populate_by_name=True)


class RateRequest(BaseModel):
    """Schema for rating a joke"""
    rate: Optional[float] = Field(
        None,
        allow_inf_nan=False,
        description="Score from 1 to 5",
        examples=[4]
    )


class CommentRequest(BaseModel):
    """Schema for commenting on a joke"""
    comment: Optional[str] = Field(None, description="Comment text")


class CommentView(BaseModel):
    content: str
    author: Optional[str] = None


class JokeView(BaseModel):
    """A joke with its derived values (random and single-joke endpoints)"""
    id: int
    category: str
    content: str
    rate: float
    comments: list[CommentView]


class JokeListItem(JokeView):
    """A joke in the full listing, with its author's name"""
    user: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str

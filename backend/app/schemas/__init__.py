"""
Pydantic Schemas Module
Request/response validation models for the API.
"""

from app.schemas.category import CategoryResponse
from app.schemas.joke import (
    JokeCreate,
    JokeUpdate,
    RateRequest,
    CommentRequest,
    CommentView,
    JokeView,
    JokeListItem,
    MessageResponse,
    ErrorResponse,
)
from app.schemas.user import LoginRequest, Token, TokenPayload, UserResponse

__all__ = [
    "CategoryResponse",
    "JokeCreate",
    "JokeUpdate",
    "RateRequest",
    "CommentRequest",
    "CommentView",
    "JokeView",
    "JokeListItem",
    "MessageResponse",
    "ErrorResponse",
    "LoginRequest",
    "Token",
    "TokenPayload",
    "UserResponse",
]

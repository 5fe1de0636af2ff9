"""
User Pydantic Schemas
Request and response models for login and user endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """
    Schema for user login request.

    Example:
        {
            "name": "alice",
            "password": "jokes123"
        }
    """
    name: str = Field(..., min_length=1, description="User name", examples=["alice"])
    password: str = Field(..., description="User's password", examples=["jokes123"])


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"


class TokenPayload(BaseModel):
    """Decoded JWT payload."""
    sub: str  # User id
    exp: int
    type: str


class UserResponse(BaseModel):
    """Public view of a user"""
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)

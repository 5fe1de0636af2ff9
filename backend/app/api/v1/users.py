"""
User Endpoints

Endpoints:
- GET /users/me - Get current user profile
"""

from fastapi import APIRouter, Depends

from app.api.v1.deps import get_current_user
from app.models.user import User
from app.schemas.user import UserResponse


router = APIRouter()


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
    description="Get the profile of the authenticated user"
)
def get_me(current_user: User = Depends(get_current_user)) -> User:
    """
    Get the authenticated user's profile.

    Example Response:
        {
            "id": 1,
            "name": "alice"
        }
    """
    return current_user

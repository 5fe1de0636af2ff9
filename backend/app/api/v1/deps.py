"""
API Dependencies
Common dependencies used across API endpoints.

This module provides:
- User authentication (JWT validation)
- The requester identity passed to joke operations
- The joke controller bound to the request's database session

Dependencies are injected into FastAPI endpoints using Depends().
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User
from app.services.auth_service import verify_token, get_user_by_id
from app.services.joke_controller import JokeController
from app.services.joke_permissions import Requester
from app.services.joke_store import JokeStore


# HTTP Bearer token scheme for JWT authentication
# Used to extract "Authorization: Bearer <token>" from request headers
security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate current user from JWT token.

    This dependency:
    1. Extracts JWT token from Authorization header
    2. Validates token signature and expiration
    3. Loads the user named in the token
    4. Attaches it to request.state for error logging

    Raises:
        HTTPException 401: If token is missing, invalid or expired
        HTTPException 404: If user not found in database
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"}
        )

    payload = verify_token(credentials.credentials, expected_type="access")
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    user = get_user_by_id(db, int(payload.sub))
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    request.state.user = user
    return user


def get_requester(current_user: User = Depends(get_current_user)) -> Requester:
    """Requester identity for joke operations."""
    return Requester(id=current_user.id, name=current_user.name)


def get_joke_controller(db: Session = Depends(get_db)) -> JokeController:
    """Joke controller working on this request's database session."""
    return JokeController(JokeStore(db))

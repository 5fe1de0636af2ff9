"""
Authentication Endpoints

Endpoints:
- POST /auth/login - Authenticate and get an access token

Users are provisioned by the seed loader; there is no registration.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.user import LoginRequest, Token
from app.services import auth_service


# Logger for auth events
auth_logger = logging.getLogger("auth")

router = APIRouter()


@router.post(
    "/login",
    response_model=Token,
    summary="Login user",
    description="Authenticate user with name and password, return an access token",
    responses={
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {"error": "Incorrect name or password"}
                }
            }
        }
    }
)
def login(credentials: LoginRequest, db: Session = Depends(get_db)) -> Token:
    """
    Authenticate user and get a JWT access token.

    Example:
        POST /api/v1/auth/login
        {
            "name": "alice",
            "password": "jokes123"
        }

        Response 200:
        {
            "access_token": "eyJhbGciOiJIUzI1NiIs...",
            "token_type": "bearer"
        }
    """
    user = auth_service.authenticate_user(db, credentials.name, credentials.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect name or password",
            headers={"WWW-Authenticate": "Bearer"}
        )

    auth_logger.info(f"User {user.id} logged in")
    return Token(access_token=auth_service.create_access_token(user.id))

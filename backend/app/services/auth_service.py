"""
Authentication Service
Handles JWT token creation, verification, and user authentication.

This service provides:
- JWT access token generation
- Token verification and decoding
- User authentication (login by name + password)
- User lookup for the authenticated requester
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import verify_password
from app.models.user import User
from app.schemas.user import TokenPayload


logger = logging.getLogger(__name__)

# Algorithm used for signing tokens (HS256 = HMAC with SHA-256)
ALGORITHM = "HS256"


# ============================================================================
# JWT Token Functions
# ============================================================================

def create_access_token(user_id: int) -> str:
    """
    Create a JWT access token for a user.

    Access tokens expire after settings.JWT_EXPIRATION seconds and are sent
    in the Authorization header.

    Example:
        token = create_access_token(user.id)
        # Use in header: Authorization: Bearer {token}
    """
    expire = datetime.now(timezone.utc) + timedelta(seconds=settings.JWT_EXPIRATION)

    payload = {
        "sub": str(user_id),  # Subject (user ID)
        "exp": expire,
        "type": "access"
    }

    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str, expected_type: str = "access") -> Optional[TokenPayload]:
    """
    Verify and decode a JWT token.

    Returns the token payload if the signature, expiration and type are
    valid, None otherwise.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        # Bad signature, expired, malformed...
        return None

    user_id = payload.get("sub")
    token_type = payload.get("type")
    exp = payload.get("exp")

    if not user_id or not token_type or not exp:
        return None

    if token_type != expected_type:
        return None

    return TokenPayload(sub=user_id, exp=exp, type=token_type)


# ============================================================================
# User Functions
# ============================================================================

def authenticate_user(db: Session, name: str, password: str) -> Optional[User]:
    """
    Authenticate a user by name and password.

    Returns:
        User object if credentials are valid, None otherwise
    """
    user = db.query(User).filter(User.name == name).first()

    if not user or not verify_password(password, user.password_hash):
        logger.info(f"Failed login for '{name}'")
        return None

    return user


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    """Get user by ID, None if it does not exist."""
    return db.query(User).filter(User.id == user_id).first()

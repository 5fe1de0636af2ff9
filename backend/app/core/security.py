"""
Security Utilities
Password hashing for user accounts.

Passwords are hashed with bcrypt through passlib; only the hash is ever
stored on the User row.
"""

from passlib.context import CryptContext


# bcrypt context, deprecated schemes are re-hashed on verify
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("jokes123")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True when plain_password matches the stored bcrypt hash."""
    return pwd_context.verify(plain_password, hashed_password)

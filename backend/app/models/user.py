"""
User Model
Represents the people who post, rate and comment on jokes.

Users are provisioned by the seed loader and only read by the joke
endpoints. The password hash exists so a user can log in and obtain a
bearer token.
"""

from sqlalchemy import Column, String

from app.models.base import BaseModel


class User(BaseModel):
    """
    User model.

    Fields:
        id (int): Primary key, inherited from BaseModel
        name (str): Unique display name, shown as the author of jokes and comments
        password_hash (str): Bcrypt hashed password
    """

    __tablename__ = "users"

    name = Column(
        String(100),
        unique=True,
        nullable=False,
        index=True,  # Login looks users up by name
        comment="User's display name"
    )

    # Password hash - NEVER store plain text passwords
    password_hash = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    def __repr__(self):
        """String representation for debugging."""
        return f"<User(id={self.id}, name={self.name})>"

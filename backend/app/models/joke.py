"""
Joke Model
The primary content record: one author, one category, any number of
ratings and comments.
"""

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from app.models.base import BaseModel


class Joke(BaseModel):
    """
    Joke Model

    Fields:
        id (int): Primary key, inherited from BaseModel
        content (str): The joke text
        category_id (int): Category the joke is filed under
        user_id (int): Author; the only user allowed to update or delete it
    """
    __tablename__ = "jokes"

    content = Column(Text, nullable=False)

    category_id = Column(
        Integer,
        ForeignKey("categories.id"),
        nullable=False,
        index=True
    )

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Author of the joke"
    )

    # Ratings and comments go away with their joke
    ratings = relationship("Rating", cascade="all, delete-orphan")
    comments = relationship("Comment", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Joke(id={self.id}, user_id={self.user_id}, category_id={self.category_id})>"

"""
Comment Model
Append-only (author, joke, text) records.
"""

from sqlalchemy import Column, ForeignKey, Integer, Text

from app.models.base import BaseModel


class Comment(BaseModel):
    """Comment left by a user on a joke."""
    __tablename__ = "comments"

    content = Column(Text, nullable=False)

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    joke_id = Column(
        Integer,
        ForeignKey("jokes.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    def __repr__(self):
        return f"<Comment(id={self.id}, joke_id={self.joke_id}, user_id={self.user_id})>"

"""
Rating Model
Append-only (rater, joke, score) records. A joke's displayed rate is the
mean of its ratings.
"""

from sqlalchemy import Column, Float, ForeignKey, Integer

from app.models.base import BaseModel


class Rating(BaseModel):
    """Numeric score given to a joke by a user other than its author."""
    __tablename__ = "ratings"

    rate = Column(Float, nullable=False)

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
        return f"<Rating(id={self.id}, joke_id={self.joke_id}, rate={self.rate})>"

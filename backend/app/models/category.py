"""
Category Model
Represents joke categories (e.g., "Dad jokes", "Programming").
Categories are provisioned by the seed loader and only read at runtime.
"""

from sqlalchemy import Column, String

from app.models.base import BaseModel


class Category(BaseModel):
    """
    Category Model

    The label is what joke views show in their "category" field.
    """
    __tablename__ = "categories"

    label = Column(String(100), unique=True, nullable=False, index=True)

    def __repr__(self):
        return f"<Category(id={self.id}, label='{self.label}')>"

"""
SQLAlchemy Declarative Base
Defines the base class for all SQLAlchemy models.

All database models should inherit from the Base class defined here.
This provides ORM functionality and table creation capabilities.
"""

from sqlalchemy.orm import declarative_base

# Declarative base class for all models
# Jokes, users, categories, comments and ratings all inherit from this base
# (through app.models.base.BaseModel) so create_all() sees every table.
Base = declarative_base()

"""
SQLAlchemy Declarative Base
Defines the base class for all SQLAlchemy models.

All database models should inherit from the Base class defined here
(usually through smart_pantry.models.base.BaseModel).
"""

from sqlalchemy.orm import declarative_base

# Declarative base class for all models
# SQLAlchemy uses this to track all models and create their tables.
Base = declarative_base()

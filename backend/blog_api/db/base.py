"""SQLAlchemy Declarative Base - shared base class for all ORM models.

Design Decisions:
    - Separate file for Base: models and the session manager import it without cycles
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all blog ORM models."""
    pass

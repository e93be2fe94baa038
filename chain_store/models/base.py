"""
Declarative base for all persistence models.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for chain store models."""
    pass

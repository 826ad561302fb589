"""SQLAlchemy declarative base shared by the persistence models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for the key-value ORM model(s)."""

"""SQLAlchemy Declarative Base — metadata root for the remote store tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all showcase ORM models."""
    pass

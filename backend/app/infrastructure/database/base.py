"""SQLAlchemy ORM base — every table (content, accounts) registers on its metadata."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass

"""SQLAlchemy ORM models."""

from eventreg.models.base import Base
from eventreg.models.submission import Submission

__all__ = [
    "Base",
    "Submission",
]

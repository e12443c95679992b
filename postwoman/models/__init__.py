"""
Models package for Postwoman.

Exports all SQLAlchemy models for database operations.
"""

from .request import Request
from .folder import Folder
from .history import History

__all__ = [
    "Request",
    "Folder",
    "History",
]

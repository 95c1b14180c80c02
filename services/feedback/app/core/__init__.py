"""Core utilities for the bus feedback service."""

from .config import settings
from .database import Base, Database, DatabaseError, ExecuteResult

__all__ = [
    "settings",
    "Base",
    "Database",
    "DatabaseError",
    "ExecuteResult",
]

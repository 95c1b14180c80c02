"""Repository helpers for the bus feedback service."""

from app.repository.feedback_repository import (
    BOOLEAN_FIELDS,
    UPDATABLE_COLUMNS,
    FeedbackRepository,
    FeedbackRepositoryError,
)

__all__ = [
    "BOOLEAN_FIELDS",
    "UPDATABLE_COLUMNS",
    "FeedbackRepository",
    "FeedbackRepositoryError",
]

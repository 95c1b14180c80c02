"""Pydantic schemas for the bus feedback service."""

from app.schemas.feedback import (
    FeedbackCreate,
    FeedbackCreated,
    FeedbackFields,
    FeedbackResponse,
    FeedbackUpdate,
    FeedbackUpdated,
    MessageResponse,
)

__all__ = [
    "FeedbackCreate",
    "FeedbackCreated",
    "FeedbackFields",
    "FeedbackResponse",
    "FeedbackUpdate",
    "FeedbackUpdated",
    "MessageResponse",
]

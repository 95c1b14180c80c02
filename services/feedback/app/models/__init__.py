"""Database models for the bus feedback service."""

from app.models.feedback import Feedback

__all__ = ["Feedback"]

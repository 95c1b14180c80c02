"""Shared dependencies for the bus feedback service."""

from fastapi import Depends, Request

from app.core.database import Database
from app.repository import FeedbackRepository
from app.services import FeedbackService


def get_database(request: Request) -> Database:
    """Return the gateway created for this application at startup."""

    return request.app.state.database


def get_feedback_service(database: Database = Depends(get_database)) -> FeedbackService:
    return FeedbackService(FeedbackRepository(database))


__all__ = ["get_database", "get_feedback_service"]

"""Service layer for the bus feedback service."""

from app.services.feedback_service import FeedbackService
from app.services.results import FailureKind, ServiceFailure, ServiceResult

__all__ = ["FailureKind", "FeedbackService", "ServiceFailure", "ServiceResult"]

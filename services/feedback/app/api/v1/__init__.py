"""Versioned API routes for the bus feedback service."""

from fastapi import APIRouter

from .feedback_routes import router as feedback_router

router = APIRouter()
router.include_router(feedback_router)

__all__ = ["router", "feedback_router"]

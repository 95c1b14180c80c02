"""API routes for rider feedback."""

from __future__ import annotations

from typing import Annotated, Any, List, Union

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse

from app.dependencies import get_feedback_service
from app.schemas import (
    FeedbackCreate,
    FeedbackCreated,
    FeedbackResponse,
    FeedbackUpdate,
    FeedbackUpdated,
    MessageResponse,
)
from app.services import FailureKind, FeedbackService, ServiceResult

router = APIRouter(prefix="/feedbacks", tags=["feedbacks"])

STATUS_BY_FAILURE = {
    FailureKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse},
}

# ``id_feedback`` is a signed 32-bit INT column.
MAX_FEEDBACK_ID = 2**31 - 1

FeedbackId = Annotated[
    int,
    Path(ge=1, le=MAX_FEEDBACK_ID, description="Identifier of the feedback record."),
]


def _unwrap(result: ServiceResult) -> Union[Any, JSONResponse]:
    if result.ok:
        return result.value
    failure = result.failure
    return JSONResponse(
        status_code=STATUS_BY_FAILURE[failure.kind],
        content={"message": failure.message},
    )


@router.post(
    "",
    response_model=FeedbackCreated,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_feedback(
    payload: FeedbackCreate,
    service: FeedbackService = Depends(get_feedback_service),
):
    return _unwrap(service.create_feedback(payload))


@router.get("", response_model=List[FeedbackResponse], responses=ERROR_RESPONSES)
def list_feedback(service: FeedbackService = Depends(get_feedback_service)):
    return _unwrap(service.list_feedback())


@router.get("/{feedback_id}", response_model=FeedbackResponse, responses=ERROR_RESPONSES)
def get_feedback(
    feedback_id: FeedbackId,
    service: FeedbackService = Depends(get_feedback_service),
):
    return _unwrap(service.get_feedback(feedback_id))


@router.put("/{feedback_id}", response_model=FeedbackUpdated, responses=ERROR_RESPONSES)
def update_feedback(
    feedback_id: FeedbackId,
    payload: FeedbackUpdate,
    service: FeedbackService = Depends(get_feedback_service),
):
    return _unwrap(service.update_feedback(feedback_id, payload))


@router.delete("/{feedback_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def delete_feedback(
    feedback_id: FeedbackId,
    service: FeedbackService = Depends(get_feedback_service),
):
    return _unwrap(service.delete_feedback(feedback_id))


__all__ = ["router"]

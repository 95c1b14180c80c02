from __future__ import annotations

from typing import List

from app.repository import FeedbackRepository, FeedbackRepositoryError
from app.schemas import (
    FeedbackCreate,
    FeedbackCreated,
    FeedbackResponse,
    FeedbackUpdate,
    FeedbackUpdated,
    MessageResponse,
)
from app.services.results import FailureKind, ServiceResult


class FeedbackService:
    def __init__(self, repository: FeedbackRepository) -> None:
        self._repository = repository

    def create_feedback(self, payload: FeedbackCreate) -> ServiceResult[FeedbackCreated]:
        try:
            feedback_id = self._repository.create(payload.model_dump())
        except FeedbackRepositoryError as exc:
            return ServiceResult.fail(FailureKind.STORAGE, str(exc))

        return ServiceResult.success(
            FeedbackCreated(id=feedback_id, message="Feedback criado com sucesso!")
        )

    def list_feedback(self) -> ServiceResult[List[FeedbackResponse]]:
        try:
            rows = self._repository.list_all()
        except FeedbackRepositoryError as exc:
            return ServiceResult.fail(FailureKind.STORAGE, str(exc))
        return ServiceResult.success([FeedbackResponse(**row) for row in rows])

    def get_feedback(self, feedback_id: int) -> ServiceResult[FeedbackResponse]:
        try:
            row = self._repository.get_by_id(feedback_id)
        except FeedbackRepositoryError as exc:
            return ServiceResult.fail(FailureKind.STORAGE, str(exc))

        if row is None:
            return ServiceResult.fail(
                FailureKind.NOT_FOUND, f"Feedback com ID {feedback_id} não encontrado."
            )
        return ServiceResult.success(FeedbackResponse(**row))

    def update_feedback(
        self, feedback_id: int, payload: FeedbackUpdate
    ) -> ServiceResult[FeedbackUpdated]:
        changes = payload.model_dump(exclude_unset=True)
        if not changes:
            return ServiceResult.fail(
                FailureKind.VALIDATION,
                "Nenhum dado foi fornecido no corpo da requisição para atualização.",
            )

        try:
            affected = self._repository.update(feedback_id, changes)
            # Zero rows means either a missing id or values identical to the
            # stored ones; reading the row back tells the two apart.
            row = self._repository.get_by_id(feedback_id)
        except FeedbackRepositoryError as exc:
            return ServiceResult.fail(FailureKind.STORAGE, str(exc))

        if row is None:
            return ServiceResult.fail(
                FailureKind.NOT_FOUND,
                f"Feedback com ID {feedback_id} não encontrado para atualização.",
            )

        if affected > 0:
            message = f"Feedback com ID {feedback_id} atualizado com sucesso."
        else:
            message = (
                f"Nenhuma alteração aplicada ao feedback com ID {feedback_id}. "
                "Os dados podem ser os mesmos já existentes."
            )
        return ServiceResult.success(
            FeedbackUpdated(message=message, feedback=FeedbackResponse(**row))
        )

    def delete_feedback(self, feedback_id: int) -> ServiceResult[MessageResponse]:
        try:
            affected = self._repository.delete(feedback_id)
        except FeedbackRepositoryError as exc:
            return ServiceResult.fail(FailureKind.STORAGE, str(exc))

        if affected == 0:
            return ServiceResult.fail(
                FailureKind.NOT_FOUND,
                f"Feedback com ID {feedback_id} não encontrado para deleção.",
            )
        return ServiceResult.success(
            MessageResponse(message=f"Feedback com ID {feedback_id} deletado com sucesso.")
        )


__all__ = ["FeedbackService"]

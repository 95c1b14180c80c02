from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import delete, insert, select, update

from app.core.database import Database, DatabaseError
from app.models import Feedback

logger = logging.getLogger(__name__)

feedback_table = Feedback.__table__

# Domain field name -> column. Only these may appear in an UPDATE's SET clause.
UPDATABLE_COLUMNS: Dict[str, str] = {
    "bus_number": "bus_number",
    "bus_line": "bus_line",
    "excessive_delay": "excessive_delay",
    "bus_overcrowded": "bus_overcrowded",
    "lack_of_accessibility": "lack_of_accessibility",
    "air_conditioning_broken": "air_conditioning_broken",
    "driver_misconduct": "driver_misconduct",
    "route_change": "route_change",
    "vehicle_poor_condition": "vehicle_poor_condition",
    "comment": "comment",
    "boarding_point": "boarding_point",
    "occurrence_location": "occurrence_location",
    "overall_rating": "overall_rating",
    "safety_rating": "safety_rating",
    "improvement_suggestions": "improvement_suggestions",
}

BOOLEAN_FIELDS = (
    "excessive_delay",
    "bus_overcrowded",
    "lack_of_accessibility",
    "air_conditioning_broken",
    "driver_misconduct",
    "route_change",
    "vehicle_poor_condition",
)


class FeedbackRepositoryError(RuntimeError):
    """Raised when feedback operations cannot be completed."""


def _row_to_record(row: Mapping[str, Any]) -> Dict[str, Any]:
    record: Dict[str, Any] = {"id": row["id_feedback"]}
    for field in UPDATABLE_COLUMNS:
        value = row[UPDATABLE_COLUMNS[field]]
        if field in BOOLEAN_FIELDS and value is not None:
            value = bool(value)
        record[field] = value
    record["submitted_at"] = row["submission_datetime"]
    return record


class FeedbackRepository:
    """Translates feedback operations into statements on ``feedback_users``."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def create(self, fields: Mapping[str, Any]) -> int:
        """Insert one row and return its generated id; absent fields become NULL."""

        values = {column: fields.get(field) for field, column in UPDATABLE_COLUMNS.items()}
        try:
            result = self._database.execute(insert(feedback_table).values(**values))
        except DatabaseError as exc:
            logger.exception("Failed to insert feedback: %s", exc)
            raise FeedbackRepositoryError("Erro ao salvar feedback no banco de dados.") from exc

        logger.info("Feedback inserted with id %s", result.generated_id)
        return int(result.generated_id)

    def list_all(self) -> List[Dict[str, Any]]:
        query = select(feedback_table).order_by(
            feedback_table.c.submission_datetime.desc(),
            feedback_table.c.id_feedback.desc(),
        )
        try:
            rows = self._database.query(query)
        except DatabaseError as exc:
            logger.exception("Failed to list feedback: %s", exc)
            raise FeedbackRepositoryError("Erro ao buscar feedbacks no banco de dados.") from exc
        return [_row_to_record(row) for row in rows]

    def get_by_id(self, feedback_id: int) -> Optional[Dict[str, Any]]:
        query = select(feedback_table).where(feedback_table.c.id_feedback == feedback_id)
        try:
            rows = self._database.query(query)
        except DatabaseError as exc:
            logger.exception("Failed to fetch feedback %s: %s", feedback_id, exc)
            raise FeedbackRepositoryError(
                "Erro ao buscar feedback por ID no banco de dados."
            ) from exc
        if not rows:
            return None
        return _row_to_record(rows[0])

    def update(self, feedback_id: int, changes: Mapping[str, Any]) -> int:
        """Update the supplied fields only and return the affected row count.

        The count follows the driver's semantics: with MySQL it may be 0 for an
        existing row whose values did not change, so callers that need to tell
        "missing" from "unchanged" must read the row back.
        """

        if not changes:
            logger.warning("Update requested for feedback %s without fields", feedback_id)
            return 0

        values: Dict[str, Any] = {}
        for field, value in changes.items():
            column = UPDATABLE_COLUMNS.get(field)
            if column is None:
                raise ValueError(f"Unsupported feedback field '{field}'")
            values[column] = value

        statement = (
            update(feedback_table)
            .where(feedback_table.c.id_feedback == feedback_id)
            .values(**values)
        )
        try:
            result = self._database.execute(statement)
        except DatabaseError as exc:
            logger.exception("Failed to update feedback %s: %s", feedback_id, exc)
            raise FeedbackRepositoryError("Erro ao atualizar feedback no banco de dados.") from exc

        logger.info("Updated feedback %s, rows affected: %s", feedback_id, result.rows_affected)
        return result.rows_affected

    def delete(self, feedback_id: int) -> int:
        statement = delete(feedback_table).where(feedback_table.c.id_feedback == feedback_id)
        try:
            result = self._database.execute(statement)
        except DatabaseError as exc:
            logger.exception("Failed to delete feedback %s: %s", feedback_id, exc)
            raise FeedbackRepositoryError("Erro ao deletar feedback no banco de dados.") from exc

        logger.info("Deleted feedback %s, rows affected: %s", feedback_id, result.rows_affected)
        return result.rows_affected


__all__ = [
    "BOOLEAN_FIELDS",
    "FeedbackRepository",
    "FeedbackRepositoryError",
    "UPDATABLE_COLUMNS",
]

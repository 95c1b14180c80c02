"""Test doubles and record builders shared by the test modules."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from app.repository import FeedbackRepositoryError


def make_record(feedback_id: int = 1, **overrides: Any) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "id": feedback_id,
        "bus_number": "XYZ-123",
        "bus_line": "101",
        "excessive_delay": None,
        "bus_overcrowded": None,
        "lack_of_accessibility": None,
        "air_conditioning_broken": None,
        "driver_misconduct": None,
        "route_change": None,
        "vehicle_poor_condition": None,
        "comment": None,
        "boarding_point": None,
        "occurrence_location": None,
        "overall_rating": 4,
        "safety_rating": 5,
        "improvement_suggestions": None,
        "submitted_at": datetime(2024, 5, 1, 8, 30),
    }
    record.update(overrides)
    return record


class StubRepository:
    """In-memory stand-in that records every call it receives."""

    def __init__(
        self,
        *,
        rows: Optional[Dict[int, Dict[str, Any]]] = None,
        update_result: int = 0,
        error: Optional[str] = None,
    ) -> None:
        self.rows = rows or {}
        self.update_result = update_result
        self.error = error
        self.calls: List[tuple] = []

    def _maybe_fail(self) -> None:
        if self.error is not None:
            raise FeedbackRepositoryError(self.error)

    def create(self, fields):
        self.calls.append(("create", dict(fields)))
        self._maybe_fail()
        return 42

    def list_all(self):
        self.calls.append(("list_all",))
        self._maybe_fail()
        return list(self.rows.values())

    def get_by_id(self, feedback_id):
        self.calls.append(("get_by_id", feedback_id))
        self._maybe_fail()
        return self.rows.get(feedback_id)

    def update(self, feedback_id, changes):
        self.calls.append(("update", feedback_id, dict(changes)))
        self._maybe_fail()
        return self.update_result

    def delete(self, feedback_id):
        self.calls.append(("delete", feedback_id))
        self._maybe_fail()
        return 1 if self.rows.pop(feedback_id, None) is not None else 0

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Feedback(Base):
    """A rider's report about a single bus trip."""

    __tablename__ = "feedback_users"

    id_feedback: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    bus_number: Mapped[str] = mapped_column(String(20), nullable=False)
    bus_line: Mapped[str] = mapped_column(String(50), nullable=False)
    # Complaint flags stay NULL when the rider did not answer.
    excessive_delay: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    bus_overcrowded: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    lack_of_accessibility: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    air_conditioning_broken: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    driver_misconduct: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    route_change: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    vehicle_poor_condition: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    comment: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    boarding_point: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    occurrence_location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    overall_rating: Mapped[int] = mapped_column(Integer, nullable=False)
    safety_rating: Mapped[int] = mapped_column(Integer, nullable=False)
    improvement_suggestions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    submission_datetime: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )


__all__ = ["Feedback"]

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StringConstraints,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

# Upper bound of MySQL TEXT (65,535 bytes) for 4-byte utf8mb4 characters.
TEXT_MAX_LENGTH = 16383


def _reject_blank(value: str) -> str:
    # Blank input is refused, but the value is stored exactly as sent.
    if not value.strip():
        raise PydanticCustomError("string_blank", "não pode estar em branco")
    return value


BusNumber = Annotated[str, StringConstraints(min_length=1, max_length=20), AfterValidator(_reject_blank)]
BusLine = Annotated[str, StringConstraints(min_length=1, max_length=50), AfterValidator(_reject_blank)]
Rating = Annotated[int, Field(strict=True, ge=1, le=5)]

# Columns declared NOT NULL; an update may change them but never clear them.
NON_NULLABLE_FIELDS = ("bus_number", "bus_line", "overall_rating", "safety_rating")


class FeedbackPayload(BaseModel):
    """Request body accepting each field by camelCase name or column name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _reject_duplicate_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for name, field in cls.model_fields.items():
            alias = field.alias
            if alias and alias != name and alias in data and name in data:
                raise PydanticCustomError(
                    "duplicate_field",
                    'O campo "{alias}" foi informado duas vezes (como "{alias}" e "{name}").',
                    {"alias": alias, "name": name},
                )
        return data


class FeedbackRequired(FeedbackPayload):
    bus_number: BusNumber
    bus_line: BusLine
    overall_rating: Rating
    safety_rating: Rating


class FeedbackFields(FeedbackPayload):
    """Optional fields shared by the create and update payloads."""

    excessive_delay: Optional[StrictBool] = None
    bus_overcrowded: Optional[StrictBool] = None
    lack_of_accessibility: Optional[StrictBool] = None
    air_conditioning_broken: Optional[StrictBool] = None
    driver_misconduct: Optional[StrictBool] = None
    route_change: Optional[StrictBool] = None
    vehicle_poor_condition: Optional[StrictBool] = None
    comment: Optional[str] = Field(None, max_length=1000)
    boarding_point: Optional[str] = Field(None, max_length=255)
    occurrence_location: Optional[str] = Field(None, max_length=255)
    improvement_suggestions: Optional[str] = Field(None, max_length=TEXT_MAX_LENGTH)


class FeedbackCreate(FeedbackFields, FeedbackRequired):
    """Payload accepted by ``POST /feedbacks``.

    Fields are collected from the last base first, so the required ones lead
    and validation reports them in the order riders fill the form: bus
    number, line, then both ratings.
    """


class FeedbackUpdate(FeedbackFields):
    """Partial payload accepted by ``PUT /feedbacks/{id}``."""

    model_config = ConfigDict(extra="forbid")

    bus_number: Optional[BusNumber] = None
    bus_line: Optional[BusLine] = None
    overall_rating: Optional[Rating] = None
    safety_rating: Optional[Rating] = None

    @model_validator(mode="after")
    def _reject_cleared_required_fields(self) -> "FeedbackUpdate":
        for field in NON_NULLABLE_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise PydanticCustomError(
                    "null_not_allowed",
                    'O campo "{field}" não pode ser nulo.',
                    {"field": to_camel(field)},
                )
        return self


class FeedbackResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    bus_number: str
    bus_line: str
    excessive_delay: Optional[bool] = None
    bus_overcrowded: Optional[bool] = None
    lack_of_accessibility: Optional[bool] = None
    air_conditioning_broken: Optional[bool] = None
    driver_misconduct: Optional[bool] = None
    route_change: Optional[bool] = None
    vehicle_poor_condition: Optional[bool] = None
    comment: Optional[str] = None
    boarding_point: Optional[str] = None
    occurrence_location: Optional[str] = None
    overall_rating: int
    safety_rating: int
    improvement_suggestions: Optional[str] = None
    submitted_at: datetime


class FeedbackCreated(BaseModel):
    id: int
    message: str


class FeedbackUpdated(BaseModel):
    message: str
    feedback: FeedbackResponse


class MessageResponse(BaseModel):
    message: str


__all__ = [
    "FeedbackCreate",
    "FeedbackCreated",
    "FeedbackFields",
    "FeedbackPayload",
    "FeedbackRequired",
    "FeedbackResponse",
    "FeedbackUpdate",
    "FeedbackUpdated",
    "MessageResponse",
    "NON_NULLABLE_FIELDS",
    "TEXT_MAX_LENGTH",
]

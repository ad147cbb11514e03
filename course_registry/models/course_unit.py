"""Pydantic models for the course unit catalog."""

from pydantic import Field

from .common import Payload, Record, UpdatePayload


class CourseUnit(Record):
    """Course unit record.

    ``lecturer_id`` is a soft reference: a copy of a Lecturer id that the
    registry never validates or cascades.
    """

    name: str
    lecturer_id: str
    semester: str = Field(description="Free-form semester label (e.g., 'Fall', 'HT')")
    year: int


class CourseUnitPayload(Payload):
    """Fields required to create a course unit."""

    name: str
    lecturer_id: str
    semester: str
    year: int


class CourseUnitUpdate(UpdatePayload):
    """Partial course unit update."""

    name: str | None = None
    lecturer_id: str | None = None
    semester: str | None = None
    year: int | None = None

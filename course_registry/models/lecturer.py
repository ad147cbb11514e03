"""Pydantic models for the lecturer catalog."""

from pydantic import Field

from .common import Payload, Record, UpdatePayload


class Lecturer(Record):
    """Lecturer record."""

    name: str
    email: str
    hire_date: str = Field(description="ISO-8601 calendar date (e.g., '2020-05-01')")
    department: str


class LecturerPayload(Payload):
    """Fields required to create a lecturer."""

    name: str
    email: str
    hire_date: str
    department: str


class LecturerUpdate(UpdatePayload):
    """Partial lecturer update."""

    name: str | None = None
    email: str | None = None
    hire_date: str | None = None
    department: str | None = None

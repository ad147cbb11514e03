"""Pydantic models for the registry catalogs.

You can import from specific modules:
    from course_registry.models.lecturer import Lecturer, LecturerPayload
    from course_registry.models.course_unit import CourseUnit, CourseUnitUpdate

Or from the main models module:
    from course_registry.models import Lecturer, CourseUnit
"""

# Common models
from .common import Payload, Record, UpdatePayload

# Course unit models
from .course_unit import CourseUnit, CourseUnitPayload, CourseUnitUpdate

# Lecturer models
from .lecturer import Lecturer, LecturerPayload, LecturerUpdate

__all__ = [
    # Common models
    "Record",
    "Payload",
    "UpdatePayload",
    # Lecturer models
    "Lecturer",
    "LecturerPayload",
    "LecturerUpdate",
    # Course unit models
    "CourseUnit",
    "CourseUnitPayload",
    "CourseUnitUpdate",
]

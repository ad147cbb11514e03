"""Course unit catalog."""

from . import query
from .catalog import Catalog
from .models import CourseUnit, CourseUnitPayload, CourseUnitUpdate


class CourseUnitCatalog(Catalog[CourseUnit, CourseUnitPayload, CourseUnitUpdate]):
    """Catalog of course units.

    ``lecturer_id`` is stored as given; it is not checked against the lecturer
    catalog and deleting a lecturer leaves its course units in place.
    """

    record_model = CourseUnit
    payload_model = CourseUnitPayload
    update_model = CourseUnitUpdate
    entity = "course unit"

    def update_name(self, course_unit_id: str, name: str) -> CourseUnit:
        """Update a course unit's name."""
        return self._update_field(course_unit_id, "name", name, "name")

    def update_lecturer(self, course_unit_id: str, lecturer_id: str) -> CourseUnit:
        """Reassign a course unit to another lecturer id."""
        return self._update_field(course_unit_id, "lecturer_id", lecturer_id, "lecturer")

    def by_lecturer(self, lecturer_id: str) -> list[CourseUnit]:
        """Get course units taught by a lecturer id."""
        return query.filter_by(self.snapshot(), "lecturer_id", lecturer_id)

    def count_by_lecturer(self, lecturer_id: str) -> int:
        """Count course units taught by a lecturer id."""
        return query.count_by(self.snapshot(), "lecturer_id", lecturer_id)

    def by_semester(self, semester: str) -> list[CourseUnit]:
        """Get course units for a semester label (exact, case-sensitive)."""
        return query.filter_by(self.snapshot(), "semester", semester)

    def by_year(self, year: int) -> list[CourseUnit]:
        """Get course units for a year."""
        return query.filter_by(self.snapshot(), "year", year)

    def by_semester_and_year(self, semester: str, year: int) -> list[CourseUnit]:
        """Get course units for a semester label within a year."""
        return query.filter_by_all(self.snapshot(), semester=semester, year=year)

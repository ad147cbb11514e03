"""Lecturer catalog."""

from . import query
from .catalog import Catalog
from .exceptions import NotFoundError
from .models import Lecturer, LecturerPayload, LecturerUpdate


class LecturerCatalog(Catalog[Lecturer, LecturerPayload, LecturerUpdate]):
    """Catalog of lecturers.

    Lookups by department, hire date and email scan the full snapshot; no
    secondary index is kept.
    """

    record_model = Lecturer
    payload_model = LecturerPayload
    update_model = LecturerUpdate
    entity = "lecturer"

    def update_name(self, lecturer_id: str, name: str) -> Lecturer:
        """Update a lecturer's name."""
        return self._update_field(lecturer_id, "name", name, "name")

    def update_email(self, lecturer_id: str, email: str) -> Lecturer:
        """Update a lecturer's email."""
        return self._update_field(lecturer_id, "email", email, "email")

    def update_department(self, lecturer_id: str, department: str) -> Lecturer:
        """Update a lecturer's department."""
        return self._update_field(lecturer_id, "department", department, "department")

    def get_by_email(self, email: str) -> Lecturer:
        """Find the first lecturer with this exact email.

        Emails are not unique; the first match in store order wins.

        Raises:
            NotFoundError: If no lecturer has this email
        """
        lecturer = query.find_first(self.snapshot(), "email", email)
        if lecturer is None:
            raise NotFoundError(f"Lecturer with email {email} not found")
        return lecturer

    def by_department(self, department: str) -> list[Lecturer]:
        """Get lecturers in a department (exact, case-sensitive)."""
        return query.filter_by(self.snapshot(), "department", department)

    def count_by_department(self, department: str) -> int:
        """Count lecturers in a department."""
        return query.count_by(self.snapshot(), "department", department)

    def by_hire_date_range(self, start: str, end: str) -> list[Lecturer]:
        """Get lecturers hired within [start, end], compared as ISO-8601 strings.

        Args:
            start: Inclusive start date (YYYY-MM-DD)
            end: Inclusive end date (YYYY-MM-DD)
        """
        return query.filter_by_range(self.snapshot(), "hire_date", start, end)

    def by_hire_year(self, year: int) -> list[Lecturer]:
        """Get lecturers hired in a calendar year. Unparseable hire dates never match."""
        return query.filter_by_year(self.snapshot(), "hire_date", year)

    def by_department_and_hire_year(self, department: str, year: int) -> list[Lecturer]:
        """Get lecturers in a department hired in a calendar year."""
        return query.filter_by_year(self.by_department(department), "hire_date", year)

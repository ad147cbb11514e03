"""Tests for the course unit catalog."""

import logging

import pytest

from course_registry import CourseUnitCatalog, CourseUnitPayload, CourseUnitUpdate, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


@pytest.fixture
def unit_payload():
    return {"name": "Compilers", "lecturerId": "lect-1", "semester": "Fall", "year": 2024}


@pytest.fixture
def populated(course_units, unit_payload):
    """Catalog with four course units across two lecturers and two years."""
    course_units.create(unit_payload)
    course_units.create(dict(unit_payload, name="Databases", semester="Spring"))
    course_units.create(dict(unit_payload, name="Algorithms", lecturerId="lect-2", year=2023))
    course_units.create(dict(unit_payload, name="Operating Systems", lecturerId="lect-2", semester="fall"))
    return course_units


def test_create_and_get(course_units, unit_payload):
    """Test create stamps id and timestamps."""
    assert isinstance(course_units, CourseUnitCatalog)

    unit = course_units.create(unit_payload)

    assert unit.id == "id-0001"
    assert unit.lecturer_id == "lect-1"
    assert unit.year == 2024
    assert unit.updated_at is None
    assert course_units.get(unit.id) == unit
    assert course_units.get_all() == [unit]


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"lecturerId": ""},
        {"semester": ""},
        {"year": 0},
        {"year": -5},
        {"year": 2024.5},
        {"year": None},
    ],
)
def test_create_rejects_invalid_fields(course_units, unit_payload, overrides):
    """Test invalid or empty fields leave the store unchanged."""
    with pytest.raises(ValidationError, match="Invalid course unit payload. All fields are required."):
        course_units.create(dict(unit_payload, **overrides))

    assert course_units.get_all() == []


def test_create_accepts_integral_float_year(course_units, unit_payload):
    """Test a float year with no fraction is stored as an integer."""
    unit = course_units.create(dict(unit_payload, year=2024.0))

    assert unit.year == 2024
    assert course_units.by_year(2024) == [unit]


def test_update_merges_fields(course_units, unit_payload):
    """Test partial update preserves untouched fields."""
    unit = course_units.create(CourseUnitPayload.model_validate(unit_payload))

    updated = course_units.update(unit.id, CourseUnitUpdate(semester="Spring", year=2025))

    assert (updated.semester, updated.year) == ("Spring", 2025)
    assert (updated.name, updated.lecturer_id) == (unit.name, unit.lecturer_id)
    assert updated.updated_at >= unit.created_at

    with pytest.raises(ValidationError, match="Invalid course unit ID."):
        course_units.update("", {"year": 2025})

    with pytest.raises(NotFoundError, match="Couldn't update a course unit with id=nope. Course unit not found"):
        course_units.update("nope", {"year": 2025})


def test_update_lecturer_and_name(course_units, unit_payload):
    """Test single-field updates."""
    unit = course_units.create(unit_payload)

    reassigned = course_units.update_lecturer(unit.id, "lect-9")
    assert reassigned.lecturer_id == "lect-9"
    assert reassigned.updated_at is not None

    renamed = course_units.update_name(unit.id, "Compiler Construction")
    assert renamed.name == "Compiler Construction"
    assert renamed.lecturer_id == "lect-9"
    assert renamed.updated_at >= reassigned.updated_at

    with pytest.raises(ValidationError, match="Invalid lecturer. Lecturer field is required."):
        course_units.update_lecturer(unit.id, "")

    with pytest.raises(ValidationError, match="Invalid course unit ID."):
        course_units.update_name("", "X")

    with pytest.raises(
        NotFoundError, match="Couldn't update the lecturer for course unit with id=nope. Course unit not found"
    ):
        course_units.update_lecturer("nope", "lect-1")


def test_single_field_update_rejects_non_string(course_units, unit_payload):
    """Test a non-string lecturer or name is refused before anything is stored."""
    unit = course_units.create(unit_payload)

    with pytest.raises(ValidationError, match="Invalid lecturer. Lecturer must be a string."):
        course_units.update_lecturer(unit.id, 7)

    with pytest.raises(ValidationError, match="Invalid name. Name must be a string."):
        course_units.update_name(unit.id, 3.5)

    assert course_units.get(unit.id) == unit


def test_update_with_invalid_year(course_units, unit_payload):
    """Test a malformed year is reported as an invalid payload, not an empty one."""
    unit = course_units.create(unit_payload)

    with pytest.raises(ValidationError, match=r"^Invalid payload\.") as exc_info:
        course_units.update(unit.id, {"year": "abc"})

    assert "At least one field" not in str(exc_info.value)
    assert course_units.get(unit.id) == unit


def test_delete(course_units, unit_payload):
    """Test delete returns the record and then reports not found."""
    unit = course_units.create(unit_payload)

    assert course_units.delete(unit.id) == unit

    with pytest.raises(NotFoundError, match=f"Course unit with id={unit.id} not found"):
        course_units.get(unit.id)
    with pytest.raises(NotFoundError, match="Couldn't delete a course unit"):
        course_units.delete(unit.id)


def test_filters(populated):
    """Test lecturer, semester and year filters."""
    assert [u.name for u in populated.by_lecturer("lect-2")] == ["Algorithms", "Operating Systems"]
    assert populated.count_by_lecturer("lect-2") == 2
    assert populated.count_by_lecturer("lect-3") == 0

    # Semester labels are case-sensitive
    assert [u.name for u in populated.by_semester("Fall")] == ["Compilers", "Algorithms"]
    assert [u.name for u in populated.by_year(2023)] == ["Algorithms"]
    assert [u.name for u in populated.by_semester_and_year("Fall", 2024)] == ["Compilers"]
    assert populated.by_semester_and_year("Spring", 2023) == []


def test_search_sort_paginate(populated):
    """Test name search, sorting and pagination."""
    assert [u.name for u in populated.search_by_name("SYS")] == ["Operating Systems"]

    sorted_names = [u.name for u in populated.sorted_by_name()]
    assert sorted_names == ["Algorithms", "Compilers", "Databases", "Operating Systems"]
    assert sorted(u.id for u in populated.sorted_by_name()) == [u.id for u in populated.get_all()]

    pages = populated.paginate(1, 3) + populated.paginate(2, 3)
    assert pages == populated.get_all()
    assert populated.paginate(3, 3) == []


def test_sorted_by_name_ignores_case(course_units, unit_payload):
    """Test lowercase names interleave with capitalised ones."""
    for name in ["databases", "Compilers", "algorithms", "Networks"]:
        course_units.create(dict(unit_payload, name=name))

    assert [u.name for u in course_units.sorted_by_name()] == ["algorithms", "Compilers", "databases", "Networks"]


def test_deleting_lecturer_does_not_cascade(lecturers, course_units, unit_payload):
    """Test course units keep a soft reference after their lecturer is deleted."""
    lecturer = lecturers.create({"name": "Ada", "email": "ada@x.edu", "hireDate": "2020-05-01", "department": "CS"})
    unit = course_units.create(dict(unit_payload, lecturerId=lecturer.id))

    lecturers.delete(lecturer.id)

    assert course_units.get(unit.id).lecturer_id == lecturer.id
    assert course_units.by_lecturer(lecturer.id) == [unit]
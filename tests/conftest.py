"""Pytest configuration and fixtures for registry tests."""

import itertools
import logging

import pytest
from dotenv import load_dotenv

from course_registry import (
    CourseUnit,
    CourseUnitCatalog,
    FileStore,
    Lecturer,
    LecturerCatalog,
    MemoryStore,
)

# Configure logging for tests
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Load environment variables
load_dotenv()


class FakeClock:
    """Deterministic nanosecond clock advancing by a fixed step per reading."""

    def __init__(self, start: int = 1_700_000_000_000_000_000, step: int = 1_000):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        self.now += self.step
        return self.now


@pytest.fixture(autouse=True)
def registry_env(monkeypatch):
    """Keep a developer's .env from leaking into client configuration."""
    monkeypatch.delenv("REGISTRY_DATA_DIR", raising=False)
    monkeypatch.delenv("REGISTRY_BACKEND", raising=False)


@pytest.fixture
def clock():
    """Fake clock fixture."""
    return FakeClock()


@pytest.fixture
def id_factory():
    """Sequential id factory producing lexically ordered ids."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter):04d}"


@pytest.fixture
def lecturers(clock, id_factory):
    """Create a memory-backed lecturer catalog.

    Returns:
        LecturerCatalog: Catalog over an open MemoryStore
    """
    store = MemoryStore()
    store.open()

    yield LecturerCatalog(store, clock=clock, id_factory=id_factory)

    # Cleanup
    store.close()


@pytest.fixture
def course_units(clock, id_factory):
    """Create a memory-backed course unit catalog.

    Returns:
        CourseUnitCatalog: Catalog over an open MemoryStore
    """
    store = MemoryStore()
    store.open()

    yield CourseUnitCatalog(store, clock=clock, id_factory=id_factory)

    # Cleanup
    store.close()


@pytest.fixture
def lecturer_file_store(tmp_path):
    """Create a file-backed lecturer store in a temporary directory."""
    store = FileStore(tmp_path / "lecturers.json", Lecturer)
    store.open()

    yield store

    store.close()


@pytest.fixture
def course_unit_file_store(tmp_path):
    """Create a file-backed course unit store in a temporary directory."""
    store = FileStore(tmp_path / "course_units.json", CourseUnit)
    store.open()

    yield store

    store.close()


@pytest.fixture
def ada_payload():
    """Payload for the reference lecturer used across tests."""
    return {
        "name": "Ada",
        "email": "ada@x.edu",
        "hireDate": "2020-05-01",
        "department": "CS",
    }

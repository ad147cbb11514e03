"""Unified client for both registry catalogs."""

import logging
import os
from pathlib import Path

from .course_units import CourseUnitCatalog
from .exceptions import ConfigurationError
from .lecturers import LecturerCatalog
from .models import CourseUnit, Lecturer
from .storage import FileStore, MemoryStore, RecordStore
from .utils import Clock, IdFactory, SystemClock, new_id

logger = logging.getLogger(__name__)

BACKENDS = ("memory", "file")

# Store file names under the data directory, one table per catalog
LECTURERS_FILE = "lecturers.json"
COURSE_UNITS_FILE = "course_units.json"


class RegistryClient:
    """Unified client owning the lecturer and course unit catalogs."""

    def __init__(
        self,
        data_dir: str | Path | None = None,
        backend: str | None = None,
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
    ):
        """Initialize registry client.

        Args:
            data_dir: Directory for store files (default: read from REGISTRY_DATA_DIR env var)
            backend: "memory" or "file" (default: REGISTRY_BACKEND env var, else "file"
                when a data directory is known and "memory" otherwise)
            clock: Nanosecond time source shared by both catalogs (default: SystemClock)
            id_factory: Unique id generator (default: uuid4 strings)

        Raises:
            ConfigurationError: If the backend is unknown or "file" has no data directory
        """
        data_dir = data_dir or os.environ.get("REGISTRY_DATA_DIR")
        self.data_dir = Path(data_dir).expanduser() if data_dir else None

        backend = (backend or os.environ.get("REGISTRY_BACKEND") or ("file" if self.data_dir else "memory")).lower()
        if backend not in BACKENDS:
            raise ConfigurationError(f"Unknown storage backend {backend!r}, expected one of {', '.join(BACKENDS)}")
        if backend == "file" and self.data_dir is None:
            raise ConfigurationError(
                "A data directory must be provided either as an argument or "
                "via the REGISTRY_DATA_DIR environment variable for the file backend"
            )
        self.backend = backend

        self.clock = clock or SystemClock()
        self.id_factory = id_factory or new_id

        self._lecturers: LecturerCatalog | None = None
        self._course_units: CourseUnitCatalog | None = None

        logger.debug(f"Initialized RegistryClient (backend: {self.backend}, data dir: {self.data_dir})")

    def _open_store(self, filename: str, model: type) -> RecordStore:
        if self.backend == "file":
            store = FileStore(self.data_dir / filename, model)
        else:
            store = MemoryStore()
        store.open()
        logger.info(f"Opened {type(store).__name__} for {model.__name__} records")
        return store

    @property
    def lecturers(self) -> LecturerCatalog:
        """Get the lecturer catalog (lazy initialization).

        Returns:
            LecturerCatalog instance
        """
        if self._lecturers is None:
            self._lecturers = LecturerCatalog(
                self._open_store(LECTURERS_FILE, Lecturer),
                clock=self.clock,
                id_factory=self.id_factory,
            )
        return self._lecturers

    @property
    def course_units(self) -> CourseUnitCatalog:
        """Get the course unit catalog (lazy initialization).

        Returns:
            CourseUnitCatalog instance
        """
        if self._course_units is None:
            self._course_units = CourseUnitCatalog(
                self._open_store(COURSE_UNITS_FILE, CourseUnit),
                clock=self.clock,
                id_factory=self.id_factory,
            )
        return self._course_units

    def close(self) -> None:
        """Close all opened stores."""
        if self._lecturers is not None:
            self._lecturers.store.close()
            self._lecturers = None
        if self._course_units is not None:
            self._course_units.store.close()
            self._course_units = None
        logger.debug("Closed RegistryClient")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

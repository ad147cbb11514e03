"""Course Registry - Lecturer and course unit catalogs over durable key-value stores."""

__version__ = "0.1.0"

# Catalogs
from .catalog import Catalog, merge_update
from .client import RegistryClient
from .course_units import CourseUnitCatalog

# Exceptions
from .exceptions import (
    ConfigurationError,
    ErrorKind,
    NotFoundError,
    RegistryError,
    StorageError,
    ValidationError,
)
from .lecturers import LecturerCatalog

# Models
from .models import (
    CourseUnit,
    CourseUnitPayload,
    CourseUnitUpdate,
    Lecturer,
    LecturerPayload,
    LecturerUpdate,
)

# Query layer
from .query import (
    count_by,
    filter_by,
    filter_by_all,
    filter_by_range,
    filter_by_year,
    find_first,
    paginate,
    search_by_name,
    sort_by_name,
)

# Storage
from .storage import FileStore, MemoryStore, RecordStore

# Utilities
from .utils import SystemClock, new_id, parse_date, parse_year

__all__ = [
    # Version
    "__version__",
    # Catalogs
    "RegistryClient",
    "Catalog",
    "LecturerCatalog",
    "CourseUnitCatalog",
    "merge_update",
    # Storage
    "RecordStore",
    "MemoryStore",
    "FileStore",
    # Models
    "Lecturer",
    "LecturerPayload",
    "LecturerUpdate",
    "CourseUnit",
    "CourseUnitPayload",
    "CourseUnitUpdate",
    # Exceptions
    "RegistryError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
    "ConfigurationError",
    "ErrorKind",
    # Query layer
    "filter_by",
    "filter_by_all",
    "filter_by_range",
    "filter_by_year",
    "search_by_name",
    "find_first",
    "count_by",
    "sort_by_name",
    "paginate",
    # Utilities
    "SystemClock",
    "new_id",
    "parse_date",
    "parse_year",
]

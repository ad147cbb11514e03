"""Custom exceptions for course-registry package."""

from enum import Enum


class ErrorKind(str, Enum):
    """Externally visible error buckets for catalog operations."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"


class RegistryError(Exception):
    """Base exception for all course-registry errors."""

    kind: ErrorKind | None = None

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(RegistryError):
    """Raised when a payload, id or field value is rejected before any write."""

    kind = ErrorKind.VALIDATION


class NotFoundError(RegistryError):
    """Raised when no record matches the requested id or email."""

    kind = ErrorKind.NOT_FOUND


class StorageError(RegistryError):
    """Raised when a store backend cannot load, persist or is used while closed."""

    pass


class ConfigurationError(RegistryError):
    """Raised when the registry client is configured inconsistently."""

    pass

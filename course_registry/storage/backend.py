"""Record store interface and implementations for catalog persistence."""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import StorageError
from ..models.common import Record

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)


class RecordStore(ABC, Generic[T]):
    """Abstract base class for record stores.

    A store is an ordered id -> record table. Implement this interface to
    create custom backends (e.g., SQLite, Redis).

    Stores have an explicit lifecycle: call ``open()`` before use and
    ``close()`` when done, or use the store as a context manager.
    """

    def __init__(self):
        self._open = False

    @property
    def is_open(self) -> bool:
        """Whether the store accepts operations."""
        return self._open

    def open(self) -> "RecordStore[T]":
        """Open the store. Opening an already open store is a no-op."""
        if not self._open:
            self._load()
            self._open = True
        return self

    def close(self) -> None:
        """Close the store. Further operations raise StorageError until reopened."""
        self._open = False

    def _load(self) -> None:
        """Hook for backends that need to read persisted state on open."""
        pass

    def _ensure_open(self) -> None:
        if not self._open:
            raise StorageError(f"{type(self).__name__} is not open")

    @abstractmethod
    def get(self, key: str) -> T | None:
        """Get a record by id.

        Args:
            key: Record id

        Returns:
            Stored record, or None if absent
        """
        pass

    @abstractmethod
    def put(self, key: str, record: T) -> None:
        """Insert or replace the record stored under an id.

        Args:
            key: Record id
            record: Record to store
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> T | None:
        """Remove a record by id.

        Args:
            key: Record id

        Returns:
            The removed record, or None if absent
        """
        pass

    @abstractmethod
    def values(self) -> list[T]:
        """Get all records in ascending id order."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every record."""
        pass

    def __len__(self) -> int:
        return len(self.values())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __enter__(self):
        """Context manager entry."""
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


class MemoryStore(RecordStore[T]):
    """In-memory record store (no persistence).

    Records are lost when the process exits.
    """

    def __init__(self):
        super().__init__()
        self._records: dict[str, T] = {}

    def get(self, key: str) -> T | None:
        self._ensure_open()
        return self._records.get(key)

    def put(self, key: str, record: T) -> None:
        self._ensure_open()
        self._records[key] = record
        logger.debug(f"Stored record: {key}")

    def remove(self, key: str) -> T | None:
        self._ensure_open()
        record = self._records.pop(key, None)
        if record is not None:
            logger.debug(f"Removed record: {key}")
        return record

    def values(self) -> list[T]:
        self._ensure_open()
        items = list(self._records.items())
        return [record for _, record in sorted(items, key=lambda item: item[0])]

    def __len__(self) -> int:
        self._ensure_open()
        return len(self._records)

    def clear(self) -> None:
        self._ensure_open()
        self._records.clear()
        logger.debug("Cleared all records")


class FileStore(MemoryStore[T]):
    """File-based record store.

    Keeps the table in memory and stores it as one JSON document
    (``{"records": {id: record}}``) that is rewritten atomically on every write.
    """

    def __init__(self, path: str | Path, model: type[T]):
        """Initialize file store.

        Args:
            path: JSON file holding the table (relative or absolute)
            model: Record model used to load stored entries
        """
        super().__init__()
        self.path = Path(path).expanduser().resolve()
        self.model = model

    def _load(self) -> None:
        self._records = {}

        if not self.path.exists():
            logger.info(f"No store file at {self.path}, starting empty")
            return

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            records = {key: self.model.model_validate(value) for key, value in data["records"].items()}
        except (OSError, json.JSONDecodeError, KeyError, TypeError, AttributeError, PydanticValidationError) as e:
            raise StorageError(f"Failed to load store file {self.path}: {e}") from e

        self._records = records
        logger.info(f"Loaded {len(records)} {self.model.__name__} records from {self.path}")

    def _save(self) -> None:
        data = {"records": {record.id: record.to_json() for record in self.values()}}

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Failed to write store file {self.path}: {e}") from e

        logger.debug(f"Wrote {len(self._records)} records to {self.path}")

    def put(self, key: str, record: T) -> None:
        previous = self.get(key)
        super().put(key, record)
        try:
            self._save()
        except StorageError:
            # Keep memory and file in step
            if previous is None:
                self._records.pop(key, None)
            else:
                self._records[key] = previous
            raise

    def remove(self, key: str) -> T | None:
        record = super().remove(key)
        if record is not None:
            try:
                self._save()
            except StorageError:
                self._records[key] = record
                raise
        return record

    def clear(self) -> None:
        super().clear()
        self._save()

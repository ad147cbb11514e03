"""Generic catalog: validated CRUD over a record store."""

import logging
import threading
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from . import query
from .exceptions import NotFoundError, StorageError, ValidationError
from .models.common import Payload, Record, UpdatePayload
from .storage import RecordStore
from .utils import Clock, IdFactory, SystemClock, new_id

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)
P = TypeVar("P", bound=Payload)
U = TypeVar("U", bound=UpdatePayload)


def merge_update(record: T, changes: dict[str, Any], now: int) -> T:
    """Return a copy of record with changes applied and ``updated_at`` refreshed.

    The new ``updated_at`` is never earlier than the record's previous write.
    """
    last_write = record.updated_at if record.updated_at is not None else record.created_at
    return record.model_copy(update={**changes, "updated_at": max(now, last_write)})


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value
    if isinstance(value, int):
        return value <= 0
    return False


class Catalog(Generic[T, P, U]):
    """CRUD operations over one record store.

    Subclasses set the record, payload and update models and the entity name
    used in error messages. Every operation runs under the catalog lock, so an
    update's lookup, merge and store happen as one step and reads never see
    a half-applied delete.
    """

    record_model: type[T]
    payload_model: type[P]
    update_model: type[U]
    entity: str

    def __init__(
        self,
        store: RecordStore[T],
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
    ):
        """Initialize catalog.

        Args:
            store: Open record store holding this catalog's records
            clock: Nanosecond time source (default: SystemClock)
            id_factory: Unique id generator (default: uuid4 strings)
        """
        self.store = store
        self.clock = clock or SystemClock()
        self.id_factory = id_factory or new_id
        self._lock = threading.RLock()

    @property
    def _title(self) -> str:
        return self.entity.capitalize()

    def _coerce(self, model: type[Any], payload: Any, message: str, invalid_message: str | None = None) -> Any:
        """Accept a model instance or a mapping validated into one.

        ``invalid_message`` prefixes pydantic failures (default: ``message``).
        """
        if isinstance(payload, model):
            return payload
        if isinstance(payload, Mapping):
            try:
                return model.model_validate(payload)
            except PydanticValidationError as e:
                prefix = invalid_message or message
                raise ValidationError(f"{prefix} ({e.error_count()} invalid field(s))") from e
        raise ValidationError(message)

    def snapshot(self) -> list[T]:
        """Get every record in store order, read under the catalog lock."""
        with self._lock:
            return self.store.values()

    def create(self, payload: P | Mapping[str, Any]) -> T:
        """Create a record from a complete payload.

        Args:
            payload: Payload model or mapping with every required field

        Returns:
            The stored record (``updated_at`` is None)

        Raises:
            ValidationError: If any required field is missing or empty
        """
        message = f"Invalid {self.entity} payload. All fields are required."
        payload = self._coerce(self.payload_model, payload, message)
        fields = payload.model_dump()
        if any(_is_blank(value) for value in fields.values()):
            raise ValidationError(message)

        with self._lock:
            record_id = self.id_factory()
            if self.store.get(record_id) is not None:
                raise StorageError(f"Generated {self.entity} id {record_id} is already in use")

            record = self.record_model(id=record_id, created_at=self.clock(), updated_at=None, **fields)
            self.store.put(record_id, record)

        logger.info(f"Created {self.entity} {record_id}")
        return record

    def get(self, record_id: str) -> T:
        """Get a record by id.

        Raises:
            NotFoundError: If no record has this id
        """
        with self._lock:
            record = self.store.get(record_id)
        if record is None:
            raise NotFoundError(f"{self._title} with id={record_id} not found")
        return record

    def get_all(self) -> list[T]:
        """Get every record in store order."""
        return self.snapshot()

    def update(self, record_id: str, payload: U | Mapping[str, Any]) -> T:
        """Merge supplied fields over an existing record.

        Fields outside the payload's field mask keep their stored value.

        Args:
            record_id: Id of the record to update
            payload: Update model or mapping with at least one field

        Returns:
            The updated record

        Raises:
            ValidationError: If the id is empty or no field is supplied
            NotFoundError: If no record has this id
        """
        if not record_id:
            raise ValidationError(f"Invalid {self.entity} ID.")

        message = "Invalid payload. At least one field must be provided for update."
        payload = self._coerce(self.update_model, payload, message, invalid_message="Invalid payload.")
        changes = payload.changes()
        if not changes:
            raise ValidationError(message)

        with self._lock:
            existing = self.store.get(record_id)
            if existing is None:
                raise NotFoundError(f"Couldn't update a {self.entity} with id={record_id}. {self._title} not found")

            updated = merge_update(existing, changes, self.clock())
            self.store.put(record_id, updated)

        logger.debug(f"Updated {self.entity} {record_id}: {sorted(changes)}")
        return updated

    def _update_field(self, record_id: str, field: str, value: Any, label: str) -> T:
        """Update a single field, with per-field validation messages."""
        if not record_id:
            raise ValidationError(f"Invalid {self.entity} ID.")
        if not value:
            raise ValidationError(f"Invalid {label}. {label.capitalize()} field is required.")
        try:
            changes = self.update_model.model_validate({field: value}).changes()
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid {label}. {label.capitalize()} must be a string.") from e

        with self._lock:
            existing = self.store.get(record_id)
            if existing is None:
                raise NotFoundError(
                    f"Couldn't update the {label} for {self.entity} with id={record_id}. {self._title} not found"
                )

            updated = merge_update(existing, changes, self.clock())
            self.store.put(record_id, updated)

        logger.debug(f"Updated {self.entity} {record_id}: {field}")
        return updated

    def delete(self, record_id: str) -> T:
        """Delete a record by id.

        Returns:
            The removed record

        Raises:
            NotFoundError: If no record has this id
        """
        with self._lock:
            removed = self.store.remove(record_id)

        if removed is None:
            raise NotFoundError(f"Couldn't delete a {self.entity} with id={record_id}. {self._title} not found.")

        logger.info(f"Deleted {self.entity} {record_id}")
        return removed

    def search_by_name(self, name: str) -> list[T]:
        """Case-insensitive substring search on name."""
        return query.search_by_name(self.snapshot(), name)

    def sorted_by_name(self, page: int | None = None, page_size: int | None = None) -> list[T]:
        """Get records sorted by name, optionally returning one page of the sorted list.

        Args:
            page: 1-based page number (default: all records)
            page_size: Records per page, required together with page
        """
        records = query.sort_by_name(self.snapshot())
        if page is None or page_size is None:
            return records
        return query.paginate(records, page, page_size)

    def paginate(self, page: int, page_size: int) -> list[T]:
        """Get one page of records in store order."""
        return query.paginate(self.snapshot(), page, page_size)

    def count(self) -> int:
        """Number of stored records."""
        with self._lock:
            return len(self.store)

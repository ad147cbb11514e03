"""Stateless queries over catalog snapshots.

Every function takes a sequence of records (usually ``store.values()``),
returns a new list or value, and never touches the store. No query raises for
an empty result.
"""

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from .utils import parse_year

T = TypeVar("T")


def filter_by(records: Iterable[T], field: str, value: Any) -> list[T]:
    """Keep records whose field equals value exactly.

    String comparison is case-sensitive.

    Args:
        records: Records to filter
        field: Attribute name (e.g., "department")
        value: Value to match

    Returns:
        List of matching records in input order
    """
    return [r for r in records if getattr(r, field) == value]


def filter_by_all(records: Iterable[T], **criteria: Any) -> list[T]:
    """Keep records matching every field=value pair exactly."""
    return [r for r in records if all(getattr(r, field) == value for field, value in criteria.items())]


def filter_by_range(records: Iterable[T], field: str, start: str, end: str) -> list[T]:
    """Keep records whose field lies lexically within [start, end].

    Lexical order only equals chronological order for zero-padded ISO-8601
    dates; other formats give undefined ordering.

    Args:
        records: Records to filter
        field: Attribute holding a date string (e.g., "hire_date")
        start: Inclusive lower bound
        end: Inclusive upper bound

    Returns:
        List of matching records in input order
    """
    return [r for r in records if start <= getattr(r, field) <= end]


def filter_by_year(records: Iterable[T], field: str, year: int) -> list[T]:
    """Keep records whose date field falls in the given calendar year.

    Dates that cannot be parsed never match.
    """
    return [r for r in records if parse_year(getattr(r, field)) == year]


def search_by_name(records: Iterable[T], query: str) -> list[T]:
    """Case-insensitive substring search on ``name``.

    An empty query matches every record.
    """
    needle = query.lower()
    return [r for r in records if needle in r.name.lower()]


def find_first(records: Iterable[T], field: str, value: Any) -> T | None:
    """Return the first record whose field equals value, or None."""
    for r in records:
        if getattr(r, field) == value:
            return r
    return None


def count_by(records: Iterable[T], field: str, value: Any) -> int:
    """Count records whose field equals value."""
    return len(filter_by(records, field, value))


def sort_by_name(records: Iterable[T]) -> list[T]:
    """Stable ascending sort on ``name``.

    Names compare case-insensitively first (``"alice"`` before ``"Bob"``);
    names differing only in case fall back to code point order.
    """
    return sorted(records, key=lambda r: (r.name.casefold(), r.name))


def paginate(records: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return one 1-based page of records.

    Bounds are clamped to the sequence, so non-positive or oversized
    arguments yield an empty (or short) page instead of an error.

    Args:
        records: Records in the order to page through
        page: Page number, starting at 1
        page_size: Records per page

    Returns:
        Records in ``[(page - 1) * page_size, page * page_size)``
    """
    start = (page - 1) * page_size
    end = start + page_size
    size = len(records)
    start = min(max(start, 0), size)
    end = min(max(end, 0), size)
    return list(records[start:end])

"""Storage backends for the registry catalogs."""

from .backend import FileStore, MemoryStore, RecordStore

__all__ = ["RecordStore", "MemoryStore", "FileStore"]

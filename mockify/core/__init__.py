"""Core: persistence adapters, resource schemas, validation and the generic record store."""
from mockify.core.errors import MockifyError, NotFoundError, StorageError, ValidationError
from mockify.core.record_store import ResourceStore
from mockify.core.storage import JsonFileAdapter, MemoryAdapter

__all__ = [
    "JsonFileAdapter",
    "MemoryAdapter",
    "MockifyError",
    "NotFoundError",
    "ResourceStore",
    "StorageError",
    "ValidationError",
]

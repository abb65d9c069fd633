"""Errors raised by validation, stores and storage; mapped to HTTP responses in the API."""


class MockifyError(Exception):
    """Base class for service errors."""


class ValidationError(MockifyError):
    """Request body failed validation. Message names the first offending field."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(MockifyError):
    """No record with the given id in the collection."""

    def __init__(self, collection: str, record_id) -> None:
        super().__init__(f"{collection}: no record with id {record_id!r}")
        self.collection = collection
        self.record_id = record_id


class StorageError(MockifyError):
    """A collection document could not be written."""

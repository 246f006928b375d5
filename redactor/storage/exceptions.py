class StorageError(Exception):
    """Base exception for object storage failures."""


class ObjectNotFoundError(StorageError):
    """Raised when the requested object does not exist."""

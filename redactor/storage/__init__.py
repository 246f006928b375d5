from redactor.storage.base import BaseStorageClient, ObjectMetadata
from redactor.storage.exceptions import ObjectNotFoundError, StorageError
from redactor.storage.factory import StorageClientFactory

__all__ = [
    "BaseStorageClient",
    "ObjectMetadata",
    "ObjectNotFoundError",
    "StorageClientFactory",
    "StorageError",
]

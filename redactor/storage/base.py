from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ObjectMetadata:
    """Subset of object attributes returned by an existence check."""

    key: str
    content_length: int | None = None
    content_type: str | None = None


class BaseStorageClient(ABC):
    """Contract for object storage adapters."""

    @abstractmethod
    def put_object(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str,
    ) -> None:
        """Write bytes to bucket/key.

        Raises:
            StorageError: on any network, auth or service failure.
        """

    @abstractmethod
    def head_object(self, bucket: str, key: str) -> ObjectMetadata:
        """Check that bucket/key exists.

        Raises:
            ObjectNotFoundError: if the object does not exist.
            StorageError: on any other failure.
        """

    @abstractmethod
    def get_object(self, bucket: str, key: str) -> object:
        """Return the raw body of bucket/key.

        The body shape depends on the backend (bytes, a readable stream, ...);
        callers convert it with ``redactor.jobs.decoding.read_text``.

        Raises:
            ObjectNotFoundError: if the object does not exist.
            StorageError: on any other failure.
        """

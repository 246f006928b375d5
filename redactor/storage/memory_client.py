import io
from dataclasses import dataclass

from redactor.storage.base import BaseStorageClient, ObjectMetadata
from redactor.storage.exceptions import ObjectNotFoundError


@dataclass(frozen=True)
class StoredObject:
    data: bytes
    content_type: str


class InMemoryStorageClient(BaseStorageClient):
    """Keeps objects in process memory.

    Bodies are returned as binary streams, like S3's streaming body.
    """

    def __init__(self) -> None:
        self._objects: dict[tuple[str, str], StoredObject] = {}

    def put_object(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str,
    ) -> None:
        self._objects[(bucket, key)] = StoredObject(bytes(data), content_type)

    def head_object(self, bucket: str, key: str) -> ObjectMetadata:
        stored = self._lookup(bucket, key)
        return ObjectMetadata(
            key=key,
            content_length=len(stored.data),
            content_type=stored.content_type,
        )

    def get_object(self, bucket: str, key: str) -> object:
        return io.BytesIO(self._lookup(bucket, key).data)

    def stored(self, bucket: str, key: str) -> StoredObject:
        """Return the stored object as written (for inspection)."""
        return self._lookup(bucket, key)

    def _lookup(self, bucket: str, key: str) -> StoredObject:
        stored = self._objects.get((bucket, key))
        if stored is None:
            raise ObjectNotFoundError(f"{bucket}/{key} not found")
        return stored

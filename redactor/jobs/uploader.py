from redactor.jobs.exceptions import UploadError
from redactor.jobs.models import SelectedFile, UploadResult
from redactor.logging.logger import Log
from redactor.storage.base import BaseStorageClient
from redactor.storage.exceptions import StorageError
from redactor.storage.keys import DEFAULT_PREFIX, ingest_key


class IngestUploader:
    """Writes the user's file into the ingest bucket under a deterministic key."""

    def __init__(
        self,
        storage: BaseStorageClient,
        key_prefix: str = DEFAULT_PREFIX,
    ) -> None:
        self._storage = storage
        self._key_prefix = key_prefix

    def upload(self, bucket: str, file: SelectedFile) -> UploadResult:
        """Write file bytes unmodified to {prefix}/{file name}.

        Raises:
            UploadError: if the storage layer rejects the write. Nothing is
                assumed about partially written objects.
        """
        key = ingest_key(file.name, self._key_prefix)
        Log.info(f"Uploading {len(file.data)} bytes to {bucket}/{key}")
        try:
            self._storage.put_object(bucket, key, file.data, file.upload_content_type)
        except StorageError as exc:
            raise UploadError(f"Failed to upload {file.name}: {exc}") from exc
        Log.info(f"Uploaded {file.name} to {bucket}/{key}")
        return UploadResult(file_name=file.name, key=key)

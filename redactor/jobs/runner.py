from redactor.config.settings import Settings
from redactor.jobs.models import RedactedObject, SelectedFile
from redactor.jobs.poller import RedactionPoller
from redactor.jobs.uploader import IngestUploader
from redactor.logging.logger import Log
from redactor.storage import BaseStorageClient, StorageClientFactory


class RedactionJobRunner:
    """Runs one redaction job: upload -> wait for the pipeline -> fetch."""

    def __init__(
        self,
        uploader: IngestUploader,
        poller: RedactionPoller,
        ingest_bucket: str,
        redacted_bucket: str,
    ) -> None:
        self._uploader = uploader
        self._poller = poller
        self._ingest_bucket = ingest_bucket
        self._redacted_bucket = redacted_bucket

    def run(self, file: SelectedFile) -> RedactedObject:
        """Upload the file, then block until the redacted copy is available."""
        Log.info(f"Starting redaction job for {file.name}")
        upload = self._uploader.upload(self._ingest_bucket, file)
        result = self._poller.wait_for_redacted(self._redacted_bucket, upload.file_name)
        Log.info(f"Redaction job for {file.name} finished ({len(result.text)} chars)")
        return result


def build_runner(
    settings: Settings,
    storage: BaseStorageClient | None = None,
) -> RedactionJobRunner:
    """Build a RedactionJobRunner from settings.

    Bucket configuration is validated before any client is created.
    """
    settings.require_runtime_config()
    if storage is None:
        storage = StorageClientFactory.create(settings)
    uploader = IngestUploader(storage, key_prefix=settings.key_prefix)
    poller = RedactionPoller(
        storage,
        max_attempts=settings.poll_max_attempts,
        initial_delay_seconds=settings.poll_initial_delay_seconds,
        max_delay_seconds=settings.poll_max_delay_seconds,
        key_prefix=settings.key_prefix,
    )
    return RedactionJobRunner(
        uploader=uploader,
        poller=poller,
        ingest_bucket=settings.ingest_bucket,
        redacted_bucket=settings.redacted_bucket,
    )

from collections.abc import Generator
from unittest.mock import patch

import pytest

from redactor.storage.base import ObjectMetadata
from redactor.storage.keys import REDACTED_MARKER
from redactor.storage.memory_client import InMemoryStorageClient


class SimulatedPipelineStorage(InMemoryStorageClient):
    """In-memory store with a fake redaction pipeline attached.

    The redacted copy of an ingested file becomes visible on the
    `ready_after`-th existence check of its output key.
    """

    def __init__(
        self,
        ingest_bucket: str,
        redacted_bucket: str,
        redacted_text: str,
        ready_after: int = 1,
    ) -> None:
        super().__init__()
        self.ingest_bucket = ingest_bucket
        self.redacted_bucket = redacted_bucket
        self.redacted_text = redacted_text
        self.ready_after = ready_after
        self.head_calls: list[str] = []

    def head_object(self, bucket: str, key: str) -> ObjectMetadata:
        if bucket == self.redacted_bucket:
            self.head_calls.append(key)
            if len(self.head_calls) == self.ready_after:
                self._produce(key)
        return super().head_object(bucket, key)

    def _produce(self, key: str) -> None:
        prefix, _, name = key.rpartition("/")
        source_key = f"{prefix}/{name.removeprefix(REDACTED_MARKER)}"
        self.stored(self.ingest_bucket, source_key)
        self.put_object(
            self.redacted_bucket, key, self.redacted_text.encode("utf-8"), "text/plain"
        )


@pytest.fixture()
def no_sleep() -> Generator[None, None, None]:
    with patch("redactor.jobs.poller.time.sleep"):
        yield


@pytest.fixture()
def pipeline_storage() -> type[SimulatedPipelineStorage]:
    return SimulatedPipelineStorage

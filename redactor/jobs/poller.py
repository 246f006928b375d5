import time
from collections.abc import Iterator

from redactor.jobs.decoding import read_text
from redactor.jobs.exceptions import PollTimeoutError
from redactor.jobs.models import RedactedObject
from redactor.logging.logger import Log
from redactor.storage.base import BaseStorageClient
from redactor.storage.exceptions import ObjectNotFoundError, StorageError
from redactor.storage.keys import DEFAULT_PREFIX, redacted_key


def backoff_delays(initial_seconds: float, max_seconds: float) -> Iterator[float]:
    """Yield initial, 2*initial, 4*initial, ... capped at max_seconds. No jitter."""
    delay = min(initial_seconds, max_seconds)
    while True:
        yield delay
        delay = min(delay * 2, max_seconds)


class RedactionPoller:
    """Waits for the external pipeline to write the redacted copy of a file.

    There is no notification channel from the pipeline, so the output key is
    probed with exponential backoff until it exists or attempts run out.
    """

    def __init__(
        self,
        storage: BaseStorageClient,
        max_attempts: int = 20,
        initial_delay_seconds: float = 1.0,
        max_delay_seconds: float = 10.0,
        key_prefix: str = DEFAULT_PREFIX,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if initial_delay_seconds <= 0 or max_delay_seconds <= 0:
            raise ValueError("poll delays must be positive")
        self._storage = storage
        self._max_attempts = max_attempts
        self._initial_delay_seconds = initial_delay_seconds
        self._max_delay_seconds = max_delay_seconds
        self._key_prefix = key_prefix

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def wait_for_redacted(self, bucket: str, file_name: str) -> RedactedObject:
        """Poll for {prefix}/redacted_{file_name}, then fetch and decode it.

        Missing objects and transient storage errors, including a stream that
        fails part way through the body, are all retried.

        Raises:
            PollTimeoutError: after max_attempts existence checks without success.
            DecodeError: if the object was fetched but is not readable text.
        """
        key = redacted_key(file_name, self._key_prefix)
        delays = backoff_delays(self._initial_delay_seconds, self._max_delay_seconds)

        for attempt in range(1, self._max_attempts + 1):
            try:
                self._storage.head_object(bucket, key)
                text = read_text(self._storage.get_object(bucket, key))
            except ObjectNotFoundError:
                Log.debug(f"Attempt {attempt}/{self._max_attempts}: {key} not there yet")
            except StorageError as exc:
                Log.warning(f"Attempt {attempt}/{self._max_attempts} for {key} failed: {exc}")
            else:
                Log.info(f"Redacted output {bucket}/{key} ready after {attempt} attempt(s)")
                return RedactedObject(key=key, text=text)

            if attempt < self._max_attempts:
                delay = next(delays)
                Log.debug(f"Waiting {delay:.1f}s before next check of {key}")
                time.sleep(delay)

        raise PollTimeoutError(
            f"Timed out waiting for {bucket}/{key} after {self._max_attempts} attempts"
        )

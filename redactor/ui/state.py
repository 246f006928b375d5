"""Session state for the redaction UI.

One ``RedactionSession`` lives in ``st.session_state`` per browser session and
decides which view renders:

    idle --submit--> processing --success--> complete --reset--> idle
                     processing --failure--> idle (with an error message)
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from redactor.jobs.exceptions import (
    DecodeError,
    PollTimeoutError,
    RedactionJobError,
    UploadError,
)
from redactor.jobs.models import RedactedObject, SelectedFile
from redactor.logging.logger import Log

SESSION_KEY = "redaction_session"
DOWNLOAD_FILE_NAME = "redacted_file.txt"
DOWNLOAD_MIME_TYPE = "text/plain"


class AppState(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETE = "complete"


class JobRunner(Protocol):
    def run(self, file: SelectedFile) -> RedactedObject: ...


class DownloadHandle:
    """Revocable reference to redacted content offered as a download."""

    def __init__(
        self,
        content: bytes,
        file_name: str = DOWNLOAD_FILE_NAME,
        mime_type: str = DOWNLOAD_MIME_TYPE,
    ) -> None:
        self._content: bytes | None = content
        self.file_name = file_name
        self.mime_type = mime_type

    @property
    def revoked(self) -> bool:
        return self._content is None

    @property
    def data(self) -> bytes:
        if self._content is None:
            raise RuntimeError("Download handle has been revoked")
        return self._content

    def revoke(self) -> None:
        self._content = None


def failure_message(exc: Exception) -> str:
    """Translate a job failure into the message shown to the user."""
    if isinstance(exc, UploadError):
        return "Upload failed. Please check your connection and try again."
    if isinstance(exc, PollTimeoutError):
        return "Timed out waiting for the redacted file. Please try again later."
    if isinstance(exc, DecodeError):
        return "The redacted file could not be read as text."
    return "Redaction failed. Please try again."


class RedactionSession:
    """Client-side record of the current job and its UI state."""

    def __init__(self, download_file_name: str = DOWNLOAD_FILE_NAME) -> None:
        self.state = AppState.IDLE
        self.selected_file: SelectedFile | None = None
        self.download_handle: DownloadHandle | None = None
        self.error: str | None = None
        self.generation = 0
        self._download_file_name = download_file_name

    def select_file(self, file: SelectedFile) -> None:
        if self.state is AppState.IDLE:
            self.selected_file = file

    def clear_file(self) -> None:
        if self.state is AppState.IDLE:
            self.selected_file = None

    def submit(self) -> bool:
        """Move idle -> processing. No-op without a selected file."""
        if self.state is not AppState.IDLE or self.selected_file is None:
            return False
        self._release_handle()
        self.error = None
        self.state = AppState.PROCESSING
        Log.info(f"Submitted {self.selected_file.name} for redaction")
        return True

    def process(self, runner: JobRunner) -> bool:
        """Run the submitted job; ends in complete on success, idle on failure."""
        if self.state is not AppState.PROCESSING or self.selected_file is None:
            return False
        try:
            result = runner.run(self.selected_file)
        except RedactionJobError as exc:
            Log.error(f"Redaction of {self.selected_file.name} failed: {exc}")
            self._fail(exc)
            return False
        except Exception as exc:
            Log.exception(f"Unexpected error while redacting {self.selected_file.name}")
            self._fail(exc)
            return False
        self.download_handle = DownloadHandle(
            result.text.encode("utf-8"),
            file_name=self._download_file_name,
        )
        self.state = AppState.COMPLETE
        return True

    def reset(self) -> None:
        """Discard the result and return to idle with no job data."""
        self._release_handle()
        self.selected_file = None
        self.error = None
        self.state = AppState.IDLE
        self.generation += 1

    def take_error(self) -> str | None:
        error, self.error = self.error, None
        return error

    def _fail(self, exc: Exception) -> None:
        self.error = failure_message(exc)
        self.state = AppState.IDLE

    def _release_handle(self) -> None:
        if self.download_handle is not None:
            self.download_handle.revoke()
            self.download_handle = None


def get_session(session_state, download_file_name: str = DOWNLOAD_FILE_NAME) -> RedactionSession:
    """Return the RedactionSession stored in ``session_state``, creating it if needed."""
    if SESSION_KEY not in session_state:
        session_state[SESSION_KEY] = RedactionSession(download_file_name)
    return session_state[SESSION_KEY]

from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class SelectedFile:
    """A file picked in the browser, already read into memory."""

    name: str
    data: bytes
    content_type: str | None = None

    @classmethod
    def from_upload(cls, uploaded: Any) -> "SelectedFile":
        """Build from a Streamlit UploadedFile (or anything with name/type/getvalue).

        The whole file is buffered up front; inputs are small text files.
        """
        name = Path(uploaded.name or "").name
        if not name:
            raise ValueError("Uploaded file must have a filename")
        return cls(
            name=name,
            data=bytes(uploaded.getvalue()),
            content_type=uploaded.type or None,
        )

    @property
    def upload_content_type(self) -> str:
        return self.content_type or DEFAULT_CONTENT_TYPE


@dataclass(frozen=True)
class UploadResult:
    file_name: str
    key: str


@dataclass(frozen=True)
class RedactedObject:
    key: str
    text: str

from dataclasses import dataclass

import pytest

from redactor.jobs.models import SelectedFile


@dataclass
class FakeUpload:
    """Stand-in for streamlit's UploadedFile."""

    name: str
    content: bytes
    type: str | None = "text/plain"

    def getvalue(self) -> bytes:
        return self.content


@pytest.fixture()
def report_file() -> SelectedFile:
    return SelectedFile(
        name="report.txt",
        data=b"Alice SSN 123-45-6789",
        content_type="text/plain",
    )


@pytest.fixture()
def fake_upload() -> FakeUpload:
    return FakeUpload(name="report.txt", content=b"Alice SSN 123-45-6789")


@pytest.fixture()
def make_upload() -> type[FakeUpload]:
    return FakeUpload

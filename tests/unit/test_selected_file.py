import pytest

from redactor.jobs.models import SelectedFile


class TestFromUpload:
    def test_reads_whole_buffer(self, fake_upload) -> None:
        file = SelectedFile.from_upload(fake_upload)

        assert file.name == "report.txt"
        assert file.data == b"Alice SSN 123-45-6789"
        assert file.content_type == "text/plain"

    def test_strips_directory_components(self, make_upload) -> None:
        file = SelectedFile.from_upload(make_upload(name="../../etc/report.txt", content=b"x"))
        assert file.name == "report.txt"

    def test_missing_type_is_none(self, make_upload) -> None:
        file = SelectedFile.from_upload(make_upload(name="a.txt", content=b"x", type=""))
        assert file.content_type is None

    def test_rejects_empty_name(self, make_upload) -> None:
        with pytest.raises(ValueError, match="filename"):
            SelectedFile.from_upload(make_upload(name="", content=b"x"))


class TestUploadContentType:
    def test_uses_declared_type(self, report_file: SelectedFile) -> None:
        assert report_file.upload_content_type == "text/plain"

    def test_defaults_to_octet_stream(self) -> None:
        file = SelectedFile(name="a.txt", data=b"x")
        assert file.upload_content_type == "application/octet-stream"

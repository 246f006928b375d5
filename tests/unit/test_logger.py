import logging
from collections.abc import Iterator

import pytest

from redactor.logging.logger import Log


@pytest.fixture(autouse=True)
def _restore_logger() -> Iterator[None]:
    handlers = list(Log._logger.handlers)
    level = Log._logger.level
    Log._logger.handlers.clear()
    yield
    Log._logger.handlers[:] = handlers
    Log._logger.setLevel(level)


class TestConfigure:
    def test_sets_level_case_insensitively(self) -> None:
        Log.configure("debug")
        assert Log._logger.level == logging.DEBUG

    def test_handler_added_once_across_reruns(self) -> None:
        Log.configure("INFO")
        Log.configure("WARNING")
        assert len(Log._logger.handlers) == 1
        assert Log._logger.level == logging.WARNING


class TestLevels:
    @pytest.mark.parametrize(
        ("method", "level"),
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_message_logged_at_level(
        self, caplog: pytest.LogCaptureFixture, method: str, level: int
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="redactor"):
            getattr(Log, method)("hello")
        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [(level, "hello")]

    def test_exception_includes_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="redactor"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                Log.exception("job failed")
        assert caplog.records[0].exc_info is not None
        assert caplog.records[0].exc_info[0] is RuntimeError

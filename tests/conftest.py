"""Shared fixtures for the gofr-env test suite."""

import pytest

from gofr_env.logger import Logger
from gofr_env.testing.pytest_fixtures import env_store, make_env  # noqa: F401 - fixtures


class RecordingLogger(Logger):
    """Logger that keeps records in memory for assertions."""

    def __init__(self):
        self.records = []

    def _record(self, level, message, **kwargs):
        self.records.append((level, message, kwargs))

    def debug(self, message, **kwargs):
        self._record("DEBUG", message, **kwargs)

    def info(self, message, **kwargs):
        self._record("INFO", message, **kwargs)

    def warning(self, message, **kwargs):
        self._record("WARNING", message, **kwargs)

    def error(self, message, **kwargs):
        self._record("ERROR", message, **kwargs)

    def critical(self, message, **kwargs):
        self._record("CRITICAL", message, **kwargs)

    def get_session_id(self):
        return "recording"

    def messages(self, level):
        return [message for lvl, message, _ in self.records if lvl == level]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """A logger that records messages instead of writing them."""
    return RecordingLogger()

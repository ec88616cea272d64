"""Shared test fixtures."""

import logging

import pytest


class RecordingSink:
    """OutputSink that keeps every line, optionally failing on chosen lines."""

    def __init__(self, fail_on: set[str] | None = None):
        self.lines: list[str] = []
        self.errors: list[str] = []
        self._fail_on = fail_on or set()

    def write(self, line: str) -> None:
        if line in self._fail_on:
            raise OSError(f"cannot write {line!r}")
        self.lines.append(line)

    def write_error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_sink():
    """Factory for sinks that fail on specific lines."""
    return RecordingSink


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep real config files and Slack credentials out of tests."""
    for name in ("WHATSONTV_CONFIG", "SLACK_TOKEN", "SLACK_CHANNEL", "LOG_LEVEL", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo setup_logging() calls made by the code under test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.NOTSET)

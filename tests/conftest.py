"""Shared test fixtures and utilities."""

import logging
import os
from pathlib import Path

import pytest

from foldermon.log_config import ConsoleHandler

# Whole seconds so every filesystem stores them exactly.
OLD_MTIME = 1_000_000_000
START_TIME = 1_500_000_000


class FakeClock:
    """Nanosecond clock that only moves when told to."""

    def __init__(self, seconds: int):
        self.seconds = seconds

    def __call__(self) -> int:
        return self.seconds * 1_000_000_000

    def advance(self, seconds: int) -> None:
        self.seconds += seconds


def set_mtime(path: Path, seconds: int) -> None:
    os.utime(path, (seconds, seconds))


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop console handlers installed by CLI tests."""
    yield
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    for handler in list(root.handlers):
        if isinstance(handler, ConsoleHandler):
            root.removeHandler(handler)


@pytest.fixture
def clock():
    return FakeClock(START_TIME)


@pytest.fixture
def folder(tmp_path):
    """The monitored folder."""
    root = tmp_path / "test_folder"
    root.mkdir()
    return root


@pytest.fixture
def write_file(folder):
    """Factory fixture to write files with an old modification time."""
    def _write(name: str, content: str = "test content", mtime: int = OLD_MTIME):
        file_path = folder / name
        file_path.write_text(content)
        set_mtime(file_path, mtime)
        return file_path
    return _write

"""
Shared fixtures for the test suite.
"""

import tempfile
from pathlib import Path
from typing import List

import pytest

from file_manager.extraction.metadata_reader import FileRecord, extract_extension


class RecordingActivityLog:
    """Activity log stub that keeps every line in memory."""

    def __init__(self):
        self.messages: List[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)

    def close(self) -> None:
        pass

    def contains(self, fragment: str) -> bool:
        return any(fragment in message for message in self.messages)


def write_file(directory: Path, name: str, size: int = 0, fill: bytes = b"x") -> Path:
    """Create ``directory/name`` holding ``size`` bytes."""
    path = Path(directory) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes((fill * size)[:size])
    return path


def make_record(name: str, size: int = 0, directory: str = "/data") -> FileRecord:
    """Build a record without touching the filesystem."""
    return FileRecord(
        name=name,
        path=Path(directory) / name,
        extension=extract_extension(name),
        size=size,
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory removed after the test."""
    with tempfile.TemporaryDirectory() as directory:
        yield Path(directory)


@pytest.fixture
def activity_log():
    """Capturing activity log."""
    return RecordingActivityLog()

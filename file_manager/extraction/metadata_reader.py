"""
Metadata Reader
===============

Turns a filesystem entry into an immutable ``FileRecord``
(name, path, extension, size).
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Dict, Any

from file_manager.utils.activity_log import NullActivityLog
from file_manager.utils.exceptions import ExtractionError
from file_manager.utils.logging_config import get_logger

logger = get_logger(__name__)


def extract_extension(filename: str) -> str:
    """Get the lowercased extension of a filename, leading dot included.

    The extension starts at the last '.' that is not the first character.
    A dotfile with no other dot keeps its whole name as the extension.

    >>> extract_extension("archive.tar.gz")
    '.gz'
    >>> extract_extension("README")
    ''
    >>> extract_extension(".gitignore")
    '.gitignore'
    """
    dot_pos = filename.rfind('.')
    if dot_pos > 0:
        return filename[dot_pos:].lower()
    if dot_pos == 0 and len(filename) > 1:
        return filename.lower()
    return ""


def format_size(size: int) -> str:
    """Render a byte count the way the file tables show it."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 ** 2:
        return f"{size // 1024} KB"
    if size < 1024 ** 3:
        return f"{size // 1024 ** 2} MB"
    return f"{size // 1024 ** 3} GB"


@dataclass(frozen=True)
class FileRecord:
    """Snapshot of one scanned file.

    Attributes:
        name: File name including extension.
        path: Full location of the file; only used to move it.
        extension: Lowercased extension with leading dot, "" if none.
        size: Size in bytes.
    """
    name: str
    path: Path
    extension: str
    size: int

    @classmethod
    def empty(cls) -> "FileRecord":
        """Zero-valued record used when metadata could not be read."""
        return cls(name="", path=Path(""), extension="", size=0)

    @property
    def is_empty(self) -> bool:
        """Whether this looks like the zero-valued placeholder."""
        return self == FileRecord.empty()

    @property
    def size_human(self) -> str:
        """Get human-readable file size."""
        return format_size(self.size)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "path": str(self.path),
            "extension": self.extension,
            "size": self.size,
            "size_human": self.size_human,
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of reading one file's metadata.

    Exactly one of ``record`` and ``error`` is set.
    """
    path: Path
    record: Optional[FileRecord] = None
    error: Optional[ExtractionError] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


class MetadataExtractor:
    """Reads name, extension and size of regular files."""

    def __init__(self, activity_log=None):
        """Initialize metadata extractor.

        Args:
            activity_log: Sink for failure messages.
        """
        self.activity_log = activity_log or NullActivityLog()

    def extract(self, file_path: Path) -> ExtractionResult:
        """Read metadata, reporting failure explicitly.

        The size is taken from a fresh ``stat`` call rather than any
        cached directory entry.

        Args:
            file_path: Path to a regular file.

        Returns:
            ExtractionResult carrying either the record or the error.
        """
        file_path = Path(file_path)
        name = file_path.name

        try:
            size = file_path.stat().st_size
        except OSError as e:
            error = ExtractionError(
                f"Cannot read file info: {e.strerror or e}",
                file_path=str(file_path),
                cause=e
            )
            self.activity_log.log(f"ERROR reading file info: {file_path}: {e}")
            logger.warning(f"Metadata read failed for {file_path}: {e}")
            return ExtractionResult(path=file_path, error=error)

        record = FileRecord(
            name=name,
            path=file_path,
            extension=extract_extension(name),
            size=size,
        )
        return ExtractionResult(path=file_path, record=record)

    def read(self, file_path: Path) -> FileRecord:
        """Read metadata, falling back to the empty record on failure.

        Callers cannot tell a failed read from a genuinely empty file
        named "" here; use ``extract`` when that matters.
        """
        result = self.extract(file_path)
        return result.record if result.ok else FileRecord.empty()

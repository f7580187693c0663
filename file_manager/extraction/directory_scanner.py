"""
Directory Scanner
=================

Lists the immediate regular files of a directory and builds one
``FileRecord`` per file. Subdirectories are not descended into.
"""

from pathlib import Path
from typing import Tuple, List, Optional

from file_manager.extraction.metadata_reader import FileRecord, MetadataExtractor
from file_manager.utils.activity_log import NullActivityLog
from file_manager.utils.logging_config import get_logger

logger = get_logger(__name__)


def directory_exists(directory: Path) -> bool:
    """Check that ``directory`` exists and is a directory."""
    try:
        directory = Path(directory)
        return directory.exists() and directory.is_dir()
    except OSError as e:
        logger.warning(f"Cannot check directory {directory}: {e}")
        return False


class DirectoryScanner:
    """Builds a record snapshot of one directory.

    A missing or unreadable directory yields an empty snapshot, not an
    error, so the caller can simply ask the user to rescan.
    """

    def __init__(
        self,
        extractor: Optional[MetadataExtractor] = None,
        activity_log=None,
        skip_unreadable: bool = False
    ):
        """Initialize directory scanner.

        Args:
            extractor: Metadata extractor. A new one is created if None.
            activity_log: Sink for progress and error messages.
            skip_unreadable: Drop files whose metadata read fails instead of
                keeping an empty placeholder record.
        """
        self.activity_log = activity_log or NullActivityLog()
        self.extractor = extractor or MetadataExtractor(activity_log=self.activity_log)
        self.skip_unreadable = skip_unreadable

    def scan(self, directory: Path) -> Tuple[FileRecord, ...]:
        """Scan the immediate children of a directory.

        Args:
            directory: Directory to scan.

        Returns:
            Tuple of records in directory listing order.
        """
        directory = Path(directory)

        if not directory_exists(directory):
            self.activity_log.log("ERROR: Cannot scan non-existent directory")
            logger.warning(f"Directory does not exist: {directory}")
            return ()

        records: List[FileRecord] = []
        try:
            for entry in directory.iterdir():
                if not entry.is_file():
                    continue

                result = self.extractor.extract(entry)
                if result.ok:
                    record = result.record
                elif self.skip_unreadable:
                    continue
                else:
                    record = FileRecord.empty()

                records.append(record)
                self.activity_log.log(f"Found file: {record.name} ({record.size} bytes)")

        except OSError as e:
            self.activity_log.log(f"ERROR scanning directory: {e}")
            logger.error(f"Failed to scan {directory}: {e}")
            return ()

        self.activity_log.log(f"Scan complete: {len(records)} files found")
        logger.debug(f"Scanned {directory}: {len(records)} files")
        return tuple(records)

"""
Duplicate Finder
================

Groups records that look like copies of each other.

Two records are treated as duplicates when their fingerprints match.
The default fingerprint is ``"<size>_<name>"``: no file content is
ever read. Files with the same name and size in different places are
therefore reported as duplicates even if their bytes differ.
"""

from typing import Callable, Dict, List, Sequence

from file_manager.extraction.metadata_reader import FileRecord
from file_manager.utils.activity_log import NullActivityLog
from file_manager.utils.logging_config import get_logger

logger = get_logger(__name__)

FINGERPRINT_SEPARATOR = "_"

Fingerprint = Callable[[FileRecord], str]


def name_size_fingerprint(record: FileRecord) -> str:
    """Fingerprint made of the size and the name of a record."""
    return f"{record.size}{FINGERPRINT_SEPARATOR}{record.name}"


class DuplicateFinder:
    """Buckets records by fingerprint and keeps buckets of two or more.

    Member order inside a group follows input order; groups are ordered
    by first appearance of their fingerprint.
    """

    MIN_GROUP_SIZE = 2

    def __init__(self, fingerprint: Fingerprint = name_size_fingerprint, activity_log=None):
        """Initialize duplicate finder.

        Args:
            fingerprint: Function computing the grouping key of a record.
            activity_log: Sink for progress messages.
        """
        self.fingerprint = fingerprint
        self.activity_log = activity_log or NullActivityLog()

    def group(self, records: Sequence[FileRecord]) -> Dict[str, List[FileRecord]]:
        """Bucket every record by fingerprint, singletons included."""
        buckets: Dict[str, List[FileRecord]] = {}
        for record in records:
            buckets.setdefault(self.fingerprint(record), []).append(record)
        return buckets

    def find_duplicates(self, records: Sequence[FileRecord]) -> Dict[str, List[FileRecord]]:
        """Find groups of records sharing a fingerprint.

        Args:
            records: Record snapshot to inspect.

        Returns:
            Dictionary mapping fingerprint to its records, only for
            fingerprints shared by at least two records.
        """
        self.activity_log.log(f"Starting duplicate detection on {len(records)} files")

        duplicates: Dict[str, List[FileRecord]] = {}
        for key, group in self.group(records).items():
            if len(group) >= self.MIN_GROUP_SIZE:
                duplicates[key] = group
                self.activity_log.log(f"Duplicate group found: {len(group)} files")

        self.activity_log.log(
            f"Duplicate detection complete: {len(duplicates)} groups found"
        )
        logger.debug(f"{len(duplicates)} duplicate groups in {len(records)} records")
        return duplicates

    @staticmethod
    def get_stats(duplicates: Dict[str, List[FileRecord]]) -> dict:
        """Summarize a duplicate mapping.

        Returns:
            Dictionary with group count, files involved, and the bytes that
            removing all but one copy per group would free.
        """
        return {
            "groups": len(duplicates),
            "files": sum(len(group) for group in duplicates.values()),
            "redundant_bytes": sum(
                group[0].size * (len(group) - 1) for group in duplicates.values()
            ),
        }


def find_duplicates(records: Sequence[FileRecord]) -> Dict[str, List[FileRecord]]:
    """Find (size, name) duplicate groups with the default finder."""
    return DuplicateFinder().find_duplicates(records)

"""
Name Search
===========

Case-insensitive substring search over file names.
"""

from typing import List, Sequence

from file_manager.extraction.metadata_reader import FileRecord
from file_manager.utils.activity_log import NullActivityLog


class NameSearcher:
    """Finds records whose name contains a search term.

    An empty term matches every record; refusing empty input is left to
    the menu and command line.
    """

    def __init__(self, activity_log=None):
        self.activity_log = activity_log or NullActivityLog()

    def search_by_name(self, records: Sequence[FileRecord], term: str) -> List[FileRecord]:
        """Search records by name.

        Args:
            records: Record snapshot to search.
            term: Text to look for, compared case-insensitively.

        Returns:
            Matching records in their original order.
        """
        needle = term.lower()
        self.activity_log.log(f"Searching for files containing: {term}")

        results = []
        for record in records:
            if needle in record.name.lower():
                results.append(record)
                self.activity_log.log(f"Match found: {record.name}")

        self.activity_log.log(f"Search complete: {len(results)} matches found")
        return results


def search_by_name(records: Sequence[FileRecord], term: str) -> List[FileRecord]:
    """Search records by name with a throwaway searcher."""
    return NameSearcher().search_by_name(records, term)

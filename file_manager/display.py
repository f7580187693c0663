"""
Console Rendering
=================

Plain-text tables for records, search results, duplicate groups and the
category table. Everything writes to a given stream (stdout by default).
"""

from typing import Dict, List, Optional, Sequence, TextIO

from file_manager.deduplication.duplicate_finder import DuplicateFinder
from file_manager.extraction.metadata_reader import FileRecord, format_size

RULE_WIDTH = 65


def _header(title: str, out: TextIO) -> None:
    print(f"\n{title}", file=out)
    print("=" * RULE_WIDTH, file=out)


def _table(records: Sequence[FileRecord], out: TextIO, human_sizes: bool = True) -> None:
    print(f"{'Filename':<40}{'Size':<15}{'Extension':<10}", file=out)
    print("-" * RULE_WIDTH, file=out)
    for record in records:
        size = record.size_human if human_sizes else f"{record.size} B"
        print(f"{record.name:<40}{size:<15}{record.extension:<10}", file=out)
    print(file=out)


def display_files(records: Sequence[FileRecord], out: Optional[TextIO] = None) -> None:
    """Print every scanned file with its exact size in bytes."""
    _header(f"📋 SCANNED FILES ({len(records)} files)", out)
    _table(records, out, human_sizes=False)


def display_search_results(results: Sequence[FileRecord], out: Optional[TextIO] = None) -> None:
    """Print search matches, or a notice when there are none."""
    if not results:
        print("\n❌ No files found matching your search.\n", file=out)
        return
    _header(f"🔍 SEARCH RESULTS ({len(results)} files)", out)
    _table(results, out)


def display_duplicates(
    duplicates: Dict[str, List[FileRecord]],
    out: Optional[TextIO] = None
) -> None:
    """Print each duplicate group with the paths of its members."""
    if not duplicates:
        print("\n✅ No duplicate files found!\n", file=out)
        return

    _header(f"📦 DUPLICATE FILES ({len(duplicates)} groups)", out)
    for number, group in enumerate(duplicates.values(), start=1):
        print(f"Duplicate Group #{number} ({len(group)} files):", file=out)
        print("-" * 60, file=out)
        for record in group:
            print(f"  📄 {record.name} ({record.size} bytes)", file=out)
            print(f"     Path: {record.path}\n", file=out)

    stats = DuplicateFinder.get_stats(duplicates)
    print(
        f"{stats['files']} files in {stats['groups']} groups, "
        f"{format_size(stats['redundant_bytes'])} held by extra copies",
        file=out
    )


def display_categories(groups: Dict[str, List[str]], out: Optional[TextIO] = None) -> None:
    """Print the category table, one category per line."""
    _header("📁 EXTENSION CATEGORY MAPPINGS", out)
    for category, extensions in groups.items():
        print(f"📁 {category}: {', '.join(extensions)}", file=out)
    print(file=out)

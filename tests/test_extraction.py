"""
Unit tests for metadata extraction and directory scanning.
"""

import os
from pathlib import Path
from unittest import mock

import pytest

from file_manager.extraction.metadata_reader import (
    FileRecord,
    MetadataExtractor,
    extract_extension,
    format_size,
)
from file_manager.extraction.directory_scanner import DirectoryScanner, directory_exists
from file_manager.utils.exceptions import ErrorCode

from conftest import write_file


class TestExtractExtension:
    """Tests for extract_extension."""

    @pytest.mark.parametrize("name, expected", [
        ("file.txt", ".txt"),
        ("archive.tar.gz", ".gz"),
        ("README", ""),
        (".gitignore", ".gitignore"),
    ])
    def test_documented_examples(self, name, expected):
        """Test the reference extension examples."""
        assert extract_extension(name) == expected

    def test_lowercased(self):
        """Test extensions are lowercased."""
        assert extract_extension("Photo.JPG") == ".jpg"
        assert extract_extension(".BashRC") == ".bashrc"

    def test_dotfile_with_second_dot(self):
        """Test a dotfile with another dot uses the last one."""
        assert extract_extension(".config.yaml") == ".yaml"

    def test_trailing_dot(self):
        """Test a trailing dot gives a bare dot extension."""
        assert extract_extension("notes.") == "."

    def test_degenerate_names(self):
        """Test empty name and a lone dot have no extension."""
        assert extract_extension("") == ""
        assert extract_extension(".") == ""


class TestFormatSize:
    """Tests for human-readable sizes."""

    def test_units(self):
        assert format_size(512) == "512 B"
        assert format_size(2048) == "2 KB"
        assert format_size(5 * 1024 ** 2) == "5 MB"
        assert format_size(6 * 1024 ** 3) == "6 GB"


class TestFileRecord:
    """Tests for FileRecord."""

    def test_immutable(self):
        """Test records cannot be modified after creation."""
        record = FileRecord("a.txt", Path("/tmp/a.txt"), ".txt", 10)
        with pytest.raises(AttributeError):
            record.size = 20

    def test_large_size(self):
        """Test sizes beyond 4 GiB are kept exactly."""
        size = 5 * 1024 ** 3 + 7
        record = FileRecord("big.iso", Path("/tmp/big.iso"), ".iso", size)
        assert record.size == size
        assert record.to_dict()["size"] == size

    def test_empty_record(self):
        """Test the zero-valued placeholder."""
        record = FileRecord.empty()
        assert record.name == ""
        assert record.extension == ""
        assert record.size == 0
        assert record.is_empty is True


class TestMetadataExtractor:
    """Tests for MetadataExtractor."""

    def test_reads_name_extension_and_size(self, temp_dir):
        """Test metadata of a regular file."""
        path = write_file(temp_dir, "Report.PDF", size=123)

        record = MetadataExtractor().read(path)

        assert record.name == "Report.PDF"
        assert record.path == path
        assert record.extension == ".pdf"
        assert record.size == 123

    def test_size_is_read_fresh(self, temp_dir):
        """Test size reflects the file at read time."""
        path = write_file(temp_dir, "grow.txt", size=3)
        extractor = MetadataExtractor()
        assert extractor.read(path).size == 3

        write_file(temp_dir, "grow.txt", size=30)
        assert extractor.read(path).size == 30

    def test_missing_file_returns_tagged_failure(self, temp_dir, activity_log):
        """Test extract reports failure explicitly."""
        extractor = MetadataExtractor(activity_log=activity_log)

        result = extractor.extract(temp_dir / "gone.txt")

        assert result.ok is False
        assert result.record is None
        assert result.error.error_code == ErrorCode.EXTRACTION_FAILED
        assert activity_log.contains("ERROR reading file info")

    def test_missing_file_read_returns_sentinel(self, temp_dir):
        """Test read falls back to the zero-valued record.

        This placeholder is indistinguishable from an empty file named ""
        and is kept on purpose; ``extract`` is the way to tell them apart.
        """
        record = MetadataExtractor().read(temp_dir / "gone.txt")

        assert record == FileRecord.empty()

    def test_stat_failure_does_not_raise(self, temp_dir):
        """Test permission style errors are swallowed into the result."""
        path = write_file(temp_dir, "locked.txt", size=4)

        with mock.patch.object(Path, "stat", side_effect=PermissionError(13, "Permission denied")):
            result = MetadataExtractor().extract(path)

        assert result.ok is False
        assert "Permission denied" in str(result.error)


class TestDirectoryScanner:
    """Tests for DirectoryScanner."""

    def test_scan_regular_files_only(self, temp_dir, activity_log):
        """Test subdirectories are neither listed nor descended into."""
        write_file(temp_dir, "a.txt", size=10)
        write_file(temp_dir, "b.jpg", size=20)
        write_file(temp_dir / "nested", "deep.txt", size=5)

        records = DirectoryScanner(activity_log=activity_log).scan(temp_dir)

        assert sorted(r.name for r in records) == ["a.txt", "b.jpg"]
        assert isinstance(records, tuple)
        assert activity_log.contains("Scan complete: 2 files found")

    def test_missing_directory_yields_nothing(self, temp_dir, activity_log):
        """Test a missing directory is zero files, not an error."""
        records = DirectoryScanner(activity_log=activity_log).scan(temp_dir / "missing")

        assert records == ()
        assert activity_log.contains("Cannot scan non-existent directory")

    def test_file_instead_of_directory(self, temp_dir):
        """Test scanning a file path yields nothing."""
        path = write_file(temp_dir, "plain.txt", size=1)
        assert DirectoryScanner().scan(path) == ()

    def test_unreadable_file_kept_as_placeholder(self, temp_dir):
        """Test failed metadata reads show up as empty records by default."""
        write_file(temp_dir, "ok.txt", size=2)
        write_file(temp_dir, "bad.txt", size=2)

        extractor = MetadataExtractor()
        original = extractor.extract

        def flaky(path):
            if Path(path).name == "bad.txt":
                return original(Path(path).with_name("does-not-exist"))
            return original(path)

        extractor.extract = flaky
        records = DirectoryScanner(extractor=extractor).scan(temp_dir)

        assert len(records) == 2
        assert FileRecord.empty() in records

    def test_unreadable_file_skipped_when_configured(self, temp_dir):
        """Test skip_unreadable drops failed reads."""
        write_file(temp_dir, "ok.txt", size=2)
        write_file(temp_dir, "bad.txt", size=2)

        extractor = MetadataExtractor()
        original = extractor.extract
        extractor.extract = lambda path: original(
            Path(path).with_name("nope") if Path(path).name == "bad.txt" else path
        )
        records = DirectoryScanner(extractor=extractor, skip_unreadable=True).scan(temp_dir)

        assert [r.name for r in records] == ["ok.txt"]

    def test_rescan_replaces_snapshot(self, temp_dir):
        """Test each scan is a full replacement."""
        scanner = DirectoryScanner()
        write_file(temp_dir, "one.txt", size=1)
        first = scanner.scan(temp_dir)

        os.unlink(temp_dir / "one.txt")
        write_file(temp_dir, "two.txt", size=1)
        second = scanner.scan(temp_dir)

        assert [r.name for r in first] == ["one.txt"]
        assert [r.name for r in second] == ["two.txt"]

    def test_directory_exists(self, temp_dir):
        assert directory_exists(temp_dir) is True
        assert directory_exists(temp_dir / "nope") is False
        assert directory_exists(write_file(temp_dir, "f.txt")) is False

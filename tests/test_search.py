"""
Unit tests for name search.
"""

from file_manager.search.name_search import NameSearcher, search_by_name

from conftest import make_record


class TestNameSearcher:
    """Tests for NameSearcher."""

    def test_case_insensitive(self):
        """Test uppercase term matches mixed-case names in order."""
        records = [
            make_record("report.txt", 1),
            make_record("Report_2024.pdf", 2),
            make_record("summary.doc", 3),
        ]

        results = search_by_name(records, "REPORT")

        assert [r.name for r in results] == ["report.txt", "Report_2024.pdf"]

    def test_substring_anywhere(self):
        """Test the term can appear anywhere in the name."""
        records = [make_record("my_report_final.txt"), make_record("final.txt")]

        assert [r.name for r in search_by_name(records, "port_f")] == ["my_report_final.txt"]

    def test_extension_is_part_of_name(self):
        """Test the extension text is searchable too."""
        records = [make_record("a.pdf"), make_record("b.txt")]

        assert [r.name for r in search_by_name(records, ".PDF")] == ["a.pdf"]

    def test_no_match(self):
        assert search_by_name([make_record("a.txt")], "zzz") == []

    def test_empty_term_matches_everything(self):
        """Test the engine itself accepts an empty term.

        Rejecting empty input is the menu's job.
        """
        records = [make_record("a.txt"), make_record("b.txt")]

        assert search_by_name(records, "") == records

    def test_preserves_duplicates_in_input(self):
        """Test identical records are all returned."""
        record = make_record("same.txt", 1)

        assert search_by_name([record, record], "same") == [record, record]

    def test_logs_matches(self, activity_log):
        """Test searches are recorded in the activity log."""
        NameSearcher(activity_log=activity_log).search_by_name(
            [make_record("cat.png"), make_record("dog.png")], "cat"
        )

        assert activity_log.messages == [
            "Searching for files containing: cat",
            "Match found: cat.png",
            "Search complete: 1 matches found",
        ]

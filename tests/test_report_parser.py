"""
Tests for report parsing.
"""

from void_updates.models import PackageUpdate
from void_updates.report_parser import parse_report


class TestParseReport:
    """Test parsing of void-updates report bodies."""

    def test_parses_update_lines(self, sample_report):
        """Test that every update line becomes an entry."""
        updates = parse_report(sample_report)

        assert set(updates) == {"python-mock", "python3", "neovim"}
        assert updates["python-mock"] == PackageUpdate("3.0.5", "4.0.3")
        assert updates["neovim"].current_version == "0.9.4"
        assert updates["neovim"].new_version == "0.9.5"

    def test_skips_header_footer_and_blank_lines(self):
        """Test that lines without the arrow separator are ignored."""
        body = "header line\n\nfoo 1.0 2.0\nbar 1.0 => 2.0\n3 packages\n"
        assert parse_report(body) == {}

    def test_empty_body(self):
        """Test that an empty report gives an empty map."""
        assert parse_report("") == {}

    def test_parsing_is_idempotent(self, sample_report):
        """Test that parsing the same text twice yields identical maps."""
        assert parse_report(sample_report) == parse_report(sample_report)

    def test_trailing_url_is_ignored(self):
        """Test that only the first three tokens are used."""
        updates = parse_report("foo 1.0 -> 2.0 https://example.org/foo")
        assert updates["foo"] == PackageUpdate("1.0", "2.0")

    def test_tabs_and_leading_whitespace(self):
        """Test that any whitespace separates tokens."""
        updates = parse_report("  foo\t1.0\t->\t2.0\n")
        assert updates["foo"] == PackageUpdate("1.0", "2.0")

    def test_duplicate_keeps_greater_new_version(self):
        """Test that a later, smaller new version does not replace the entry."""
        updates = parse_report("foo 1.0 -> 2.0\nfoo 1.0 -> 1.5\n")
        assert updates["foo"].new_version == "2.0"

    def test_duplicate_later_greater_version_wins(self):
        """Test that a later, greater new version replaces the entry."""
        updates = parse_report("foo 1.0 -> 1.5\nfoo 1.1 -> 2.0\n")
        assert updates["foo"] == PackageUpdate("1.1", "2.0")

    def test_duplicate_equal_version_last_line_wins(self):
        """Test that ties go to the later line."""
        updates = parse_report("foo 1.0 -> 2.0\nfoo 1.1 -> 2.0\n")
        assert updates["foo"].current_version == "1.1"

    def test_duplicate_comparison_is_lexicographic(self):
        """Test that new versions compare as strings, so "2.0" beats "10.0"."""
        updates = parse_report("foo 1.0 -> 2.0\nfoo 1.0 -> 10.0\n")
        assert updates["foo"].new_version == "2.0"

        updates = parse_report("foo 1.0 -> 10.0\nfoo 1.0 -> 2.0\n")
        assert updates["foo"].new_version == "2.0"

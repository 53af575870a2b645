"""Tests for LOG section entries."""

import pytest

from logbook.core.document import parse, serialize
from logbook.core.log import append_log_entry, log_insertion_index
from logbook.errors import SectionNotFound

DAILY = (
    "# Jan 15 2025 Wednesday\n"
    "<!-- add today summary below this line -->\n"
    "\n"
    "# One-line note\n"
    "\n"
    "# LOG\n"
    "\n"
)


class TestAppendLogEntry:
    def test_first_entry_in_template(self):
        doc = append_log_entry(parse(DAILY), "09:00 coffee")
        assert serialize(doc).endswith("# LOG\n\n09:00 coffee\n")

    def test_entries_keep_insertion_order(self):
        doc = parse(DAILY)
        entries = [f"{hour:02d}:00 entry {hour}" for hour in (14, 9, 11, 8, 20)]
        for entry in entries:
            doc = append_log_entry(doc, entry)

        heading = doc.lines.index("# LOG")
        assert list(doc.lines[heading + 2:]) == entries

    def test_no_blank_lines_between_entries(self):
        doc = parse("# T\n# LOG\n")
        for n in range(3):
            doc = append_log_entry(doc, f"entry {n}")
        assert serialize(doc) == "# T\n# LOG\nentry 0\nentry 1\nentry 2\n"

    def test_inserts_before_following_section(self):
        doc = parse("# T\n# LOG\na\n\n# Other\nz\n")
        result = append_log_entry(doc, "b")
        assert serialize(result) == "# T\n# LOG\na\nb\n\n# Other\nz\n"

    def test_empty_log_followed_by_another_section(self):
        doc = parse("# T\n# LOG\n\n# One-line note\n* old\n")
        result = append_log_entry(doc, "10:00 x")
        assert serialize(result) == "# T\n# LOG\n10:00 x\n\n# One-line note\n* old\n"

    def test_log_directly_followed_by_heading(self):
        doc = parse("# T\n# LOG\n# One-line note\n* old\n")
        result = append_log_entry(doc, "a")
        result = append_log_entry(result, "b")
        assert serialize(result) == "# T\n# LOG\na\nb\n# One-line note\n* old\n"

    def test_entries_stop_at_any_heading(self):
        doc = parse("# T\n# LOG\na\n## Later\nz\n")
        result = append_log_entry(doc, "b")
        assert result.lines == ("# T", "# LOG", "a", "b", "## Later", "z")

    def test_keeps_unicode_line_separators(self):
        doc = parse("# T\nA\u2028B quote\n\n# LOG\n")
        result = append_log_entry(doc, "09:00 Coffee")
        assert serialize(result) == "# T\nA\u2028B quote\n\n# LOG\n09:00 Coffee\n"

    def test_uses_first_log_heading(self):
        doc = parse("# T\n# LOG (draft)\nold\n\n# LOG\n")
        result = append_log_entry(doc, "new")
        assert result.lines[1:4] == ("# LOG (draft)", "old", "new")

    def test_missing_log_heading(self):
        with pytest.raises(SectionNotFound, match="LOG"):
            append_log_entry(parse("# T\nno log here\n"), "entry")

    def test_does_not_mutate_input(self):
        doc = parse(DAILY)
        append_log_entry(doc, "entry")
        assert doc == parse(DAILY)


class TestInsertionIndex:
    def test_skips_blank_lines_then_entries(self):
        doc = parse("# T\n# LOG\n\n\na\nb\n\nc\n")
        assert log_insertion_index(doc) == 6

    def test_end_of_document(self):
        assert log_insertion_index(parse("# T\n# LOG\n")) == 2

    def test_stays_inside_log_section(self):
        doc = parse("# T\n# LOG\n\n\n# One-line note\n* old\n")
        assert log_insertion_index(doc) == 2

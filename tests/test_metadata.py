"""Tests for metadata block extraction."""

from interview_sources.engine.core.document import FileMetadata
from interview_sources.engine.core.metadata import extract_metadata, find_metadata_block


class TestExtractMetadata:
    def test_title_only(self):
        meta = extract_metadata("metadata:\n  title: Demo\n---\nquestion: hi")
        assert meta.title == "Demo"
        assert meta.short_title is None
        assert meta.documentation is None
        assert meta.example_start is None
        assert meta.example_end is None

    def test_all_fields(self):
        content = (
            "metadata:\n"
            "  title: Yes or no question\n"
            "  short title: Yes/no\n"
            '  documentation: "https://docassemble.org/docs/fields.html#yesno"\n'
            "  example start: 2\n"
            "  example end: 3\n"
            "---\n"
            "question: Ok?\n"
        )
        meta = extract_metadata(content)
        assert meta.title == "Yes or no question"
        assert meta.short_title == "Yes/no"
        assert meta.documentation == "https://docassemble.org/docs/fields.html#yesno"
        assert meta.example_start == 2
        assert meta.example_end == 3

    def test_quoted_title_is_unquoted(self):
        meta = extract_metadata("metadata:\n  title: 'Quoted'\n")
        assert meta.title == "Quoted"

    def test_no_block(self):
        assert extract_metadata("question: |\n  Hello\n") == FileMetadata()

    def test_block_must_start_a_line(self):
        assert extract_metadata("  metadata:\n    title: Nested\n").title is None

    def test_non_numeric_marker_is_ignored(self):
        meta = extract_metadata("metadata:\n  title: T\n  example start: soon\n")
        assert meta.title == "T"
        assert meta.example_start is None

    def test_block_ends_at_unindented_line(self):
        content = "metadata:\n  title: Inside\nquestion: |\n  title: Outside\n"
        block = find_metadata_block(content)
        assert "Inside" in block
        assert "Outside" not in block

"""Tests for the inverted keyword index."""

import pytest

from interview_sources.engine.scoring.keyword_index import (
    build_keyword_index,
    compile_keyword_pattern,
)

from .conftest import DOCS_DIR, EXAMPLES_DIR


class TestKeywordPattern:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("show if: x", True),
            ("show   if", True),
            ("SHOW\nIF", True),
            ("showif", False),
            ("reshow if", False),
        ],
    )
    def test_multiword_whole_word(self, text, expected):
        assert bool(compile_keyword_pattern("show if").search(text)) is expected

    def test_metacharacters_are_literal(self):
        pattern = compile_keyword_pattern("pdf/a")
        assert pattern.search("Produce PDF/A output")
        assert not pattern.search("pdf-a")

    def test_dot_is_literal(self):
        pattern = compile_keyword_pattern("a.b")
        assert pattern.search("a.b")
        assert not pattern.search("axb")


class TestBuildKeywordIndex:
    def test_only_matched_keywords_present(self, flat_index):
        index = flat_index({"a.yml": "question: hi\n"})
        keyword_index = build_keyword_index(index.all_files(), ["question", "yesno"])
        assert set(keyword_index) == {"question"}
        assert keyword_index["question"] == frozenset({"a.yml"})

    def test_keys_are_case_folded(self, flat_index):
        index = flat_index({"a.yml": "objects:\n  - client: Individual\n"})
        keyword_index = build_keyword_index(index.all_files(), ["Individual", "individual"])
        assert list(keyword_index) == ["individual"]

    def test_whole_word_only(self, flat_index):
        index = flat_index({"a.yml": "questions: plural\n"})
        keyword_index = build_keyword_index(index.all_files(), ["question"])
        assert "question" not in keyword_index


class TestFilesWithKeyword:
    def test_files_in_ingestion_order(self, index):
        paths = [f.relative_path for f in index.files_with_keyword("show if")]
        assert paths == [f"{EXAMPLES_DIR}/fields.yml", f"{DOCS_DIR}/fields.md"]

    def test_case_insensitive_lookup(self, index):
        assert index.files_with_keyword("DAList") == index.files_with_keyword("dalist")
        assert len(index.files_with_keyword("dalist")) == 1

    def test_unknown_keyword(self, index):
        assert index.files_with_keyword("not-a-keyword") == []

    def test_every_indexed_path_is_a_file(self, index):
        for paths in index.keyword_index.values():
            assert paths
            for path in paths:
                assert index.get_file(path) is not None

"""Tests for index construction, lookups, stats and immutability."""

import dataclasses

import pytest

from interview_sources.engine import initialize
from interview_sources.exceptions import CorpusRootNotFoundError, InterviewSourcesError
from interview_sources.models import FileType

from .conftest import DEFAULT_ROOTS, EXAMPLES_DIR


class TestInitialize:
    def test_missing_base_raises(self, tmp_path):
        with pytest.raises(CorpusRootNotFoundError) as exc_info:
            initialize(tmp_path / "missing", DEFAULT_ROOTS)
        assert "missing" in str(exc_info.value)
        assert isinstance(exc_info.value, InterviewSourcesError)

    def test_file_as_base_raises(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")
        with pytest.raises(CorpusRootNotFoundError):
            initialize(path, DEFAULT_ROOTS)

    def test_empty_base_builds_empty_index(self, tmp_path):
        index = initialize(tmp_path, DEFAULT_ROOTS)
        assert index.all_files() == []
        assert index.get_stats().total_files == 0

    def test_default_roots_from_settings(self, corpus_dir):
        index = initialize(corpus_dir)
        assert index.get_example_by_name("yesno") is not None
        assert index.get_stats().total_files == 6

    def test_base_path_is_absolute(self, index, corpus_dir):
        assert index.base_path == str(corpus_dir.resolve())


class TestLookups:
    def test_get_file(self, index):
        file = index.get_file(f"{EXAMPLES_DIR}/yesno.yml")
        assert file is index.get_example_by_name("yesno")
        assert index.get_file("nope.yml") is None

    def test_get_example_by_name_examples_only(self, index):
        assert index.get_example_by_name("letter") is None
        assert index.get_example_by_name("interview").metadata.title == "Demo interview"

    def test_all_examples(self, index):
        examples = index.all_examples()
        assert len(examples) == 4
        assert all(f.file_type == FileType.EXAMPLE for f in examples)

    def test_all_files_is_a_copy(self, index):
        files = index.all_files()
        files.clear()
        assert len(index.all_files()) == 6


class TestStats:
    def test_counts(self, index):
        stats = index.get_stats()
        assert stats.total_files == 6
        assert stats.examples == 4
        assert stats.docs == 1
        assert stats.templates == 1
        assert stats.others == 0
        assert stats.keyword_count == len(index.keyword_index)

    def test_counts_sum_to_total(self, index):
        stats = index.get_stats()
        assert stats.examples + stats.docs + stats.templates + stats.others == stats.total_files


class TestImmutability:
    def test_index_attributes_frozen(self, index):
        with pytest.raises(dataclasses.FrozenInstanceError):
            index.files = {}

    def test_file_table_read_only(self, index):
        with pytest.raises(TypeError):
            index.files["new.yml"] = index.all_files()[0]

    def test_keyword_index_read_only(self, index):
        with pytest.raises(TypeError):
            index.keyword_index["question"] = frozenset()
        assert isinstance(next(iter(index.keyword_index.values())), frozenset)

    def test_indexed_file_frozen(self, index):
        file = index.get_example_by_name("yesno")
        with pytest.raises(dataclasses.FrozenInstanceError):
            file.content = ""
        assert isinstance(file.lines, tuple)

    def test_search_result_frozen(self, index):
        result = index.search("question")[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.score = 0

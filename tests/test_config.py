"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from interview_sources.config import Settings
from interview_sources.models import FileType


class TestSettings:
    def test_default_roots_order(self):
        roots = Settings(_env_file=None).corpus_roots
        assert [root.file_type for root in roots] == [
            FileType.EXAMPLE,
            FileType.EXAMPLE,
            FileType.TEMPLATE,
            FileType.DOC,
        ]

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("IS_EXAMPLE_DIRS", "ex1, ex2")
        monkeypatch.setenv("IS_OTHER_DIRS", "misc")
        monkeypatch.setenv("IS_CORPUS_PATH", "/srv/corpus")

        config = Settings(_env_file=None)

        assert config.corpus_path == "/srv/corpus"
        paths = {(root.path, root.file_type) for root in config.corpus_roots}
        assert ("ex1", FileType.EXAMPLE) in paths
        assert ("ex2", FileType.EXAMPLE) in paths
        assert ("misc", FileType.OTHER) in paths

    def test_extensions_list(self, monkeypatch):
        monkeypatch.setenv("IS_EXTENSIONS", ".yml, .MD")
        assert Settings(_env_file=None).extensions_list == (".yml", ".MD")

    def test_max_results_bounds(self, monkeypatch):
        monkeypatch.setenv("IS_DEFAULT_MAX_RESULTS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

"""Configuration for the interview sources index.

Settings are read from the environment (prefix ``IS_``) or an optional
``.env`` file in the working directory.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .engine.core.document import CorpusRoot
from .models.enums import FileType


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Runtime settings.

    Directory lists are comma separated and relative to ``corpus_path``.
    """

    model_config = SettingsConfigDict(
        env_prefix="IS_",
        env_file=".env",
        extra="ignore",
    )

    corpus_path: str = Field(
        default=str(Path.cwd().parent / "docassemble-ref"),
        description="Root of the docassemble reference checkout",
    )
    example_dirs: str = (
        "docassemble_base/docassemble/base/data/questions/examples,"
        "docassemble_demo/docassemble/demo/data/questions"
    )
    doc_dirs: str = "docs"
    template_dirs: str = "docassemble_base/docassemble/base/data/templates"
    other_dirs: str = ""
    extensions: str = ".yml,.yaml,.md"

    default_max_results: int = Field(default=8, ge=1, le=25)
    log_level: str = "INFO"
    debug: bool = False

    @property
    def extensions_list(self) -> tuple[str, ...]:
        return tuple(_split_csv(self.extensions))

    @property
    def corpus_roots(self) -> list[CorpusRoot]:
        """Sub-roots to ingest, in ingestion order."""
        groups = (
            (self.example_dirs, FileType.EXAMPLE),
            (self.template_dirs, FileType.TEMPLATE),
            (self.doc_dirs, FileType.DOC),
            (self.other_dirs, FileType.OTHER),
        )
        roots: list[CorpusRoot] = []
        for value, file_type in groups:
            for directory in _split_csv(value):
                roots.append(CorpusRoot(path=directory, file_type=file_type))
        return roots


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

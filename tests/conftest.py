"""
Pytest configuration and shared fixtures

Builds small reference corpora on disk with the same directory layout as
a docassemble checkout, so ingestion runs against real files.
"""
from pathlib import Path

import pytest

from interview_sources.engine import initialize
from interview_sources.engine.core.document import CorpusRoot
from interview_sources.engine.handlers import HandlerContext
from interview_sources.models import FileType

EXAMPLES_DIR = "docassemble_base/docassemble/base/data/questions/examples"
DEMO_DIR = "docassemble_demo/docassemble/demo/data/questions"
TEMPLATES_DIR = "docassemble_base/docassemble/base/data/templates"
DOCS_DIR = "docs"

DEFAULT_ROOTS = [
    CorpusRoot(EXAMPLES_DIR, FileType.EXAMPLE),
    CorpusRoot(DEMO_DIR, FileType.EXAMPLE),
    CorpusRoot(TEMPLATES_DIR, FileType.TEMPLATE),
    CorpusRoot(DOCS_DIR, FileType.DOC),
]

YESNO_YML = """metadata:
  title: Yes or no question
  short title: Yes/no
  documentation: "https://docassemble.org/docs/fields.html#yesno"
  example start: 2
  example end: 3
---
question: |
  Are you over 18?
yesno: over_eighteen
---
mandatory: True
question: |
  You answered.
"""

FIELDS_YML = """question: |
  What is your name?
fields:
  - First name: first_name
  - Last name: last_name
    show if: ask_last
"""

INTERVIEW_YML = """metadata:
  title: Demo interview
---
objects:
  - client: Individual
---
question: |
  Hello ${ client }
"""

NESTED_YAML = """code: |
  x = DAList('x')
"""

LETTER_MD = """# Letter

Dear ${ client },
"""

FIELDS_MD = """# Fields

The `show if` modifier hides a field.
A question about fields.
"""

CORPUS_FILES = {
    f"{EXAMPLES_DIR}/yesno.yml": YESNO_YML,
    f"{EXAMPLES_DIR}/fields.yml": FIELDS_YML,
    f"{EXAMPLES_DIR}/notes.txt": "question: ignored extension\n",
    f"{DEMO_DIR}/interview.yml": INTERVIEW_YML,
    f"{DEMO_DIR}/sub/nested.yaml": NESTED_YAML,
    f"{TEMPLATES_DIR}/letter.md": LETTER_MD,
    f"{DOCS_DIR}/fields.md": FIELDS_MD,
}


def write_corpus(base: Path, files: dict[str, str]) -> Path:
    """Write ``files`` (relative path -> content) under ``base``."""
    for relative_path, content in files.items():
        path = base / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return base


@pytest.fixture
def corpus_dir(tmp_path):
    """A corpus laid out like a docassemble checkout."""
    return write_corpus(tmp_path / "docassemble-ref", CORPUS_FILES)


@pytest.fixture
def index(corpus_dir):
    return initialize(corpus_dir, DEFAULT_ROOTS)


@pytest.fixture
def ctx(index):
    return HandlerContext(index=index)


@pytest.fixture
def flat_index(tmp_path):
    """Factory: index a flat directory of files, all classified as examples."""

    def _build(files: dict[str, str], file_type: FileType = FileType.EXAMPLE):
        base = write_corpus(tmp_path / "flat", files)
        return initialize(base, [CorpusRoot(".", file_type)])

    return _build

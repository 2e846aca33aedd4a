"""Exception types raised by the corpus index."""


class InterviewSourcesError(Exception):
    """Base class for errors raised by this package."""


class CorpusRootNotFoundError(InterviewSourcesError):
    """Raised when the corpus base directory does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Corpus reference path not found: {path}")

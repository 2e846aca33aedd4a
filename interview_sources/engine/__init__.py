"""Corpus indexing and citation-backed search engine.

    from interview_sources.engine import initialize

    index = initialize("/path/to/docassemble-ref")
    results = index.search("show if", max_results=5)
    citation = index.create_citation(results[0].relative_path, 1, 4)
"""

from .index import CorpusIndex, initialize

__all__ = [
    "CorpusIndex",
    "initialize",
]

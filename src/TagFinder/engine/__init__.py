"""Query evaluation engine."""

from __future__ import annotations

from TagFinder.engine.matcher import condition_matches, query_matches, term_matches
from TagFinder.engine.search import search

__all__ = [
    "condition_matches",
    "query_matches",
    "search",
    "term_matches",
]

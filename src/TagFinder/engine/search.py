"""Corpus scan for tag queries."""

from __future__ import annotations

from TagFinder.core.models import Corpus, SearchResult
from TagFinder.core.query import TagQuery
from TagFinder.engine.matcher import query_matches


def search(corpus: Corpus, query: TagQuery, max_results: int) -> SearchResult:
    """Scan the corpus once and collect matching image identifiers.

    Entries without a tag profile never match. Identifiers are kept in corpus
    order until ``max_results`` is reached; the scan still runs to the end so
    that the count covers every match.

    Args:
        corpus: Read-only corpus to scan.
        query: Parsed query.
        max_results: Maximum number of identifiers to return.

    Returns:
        Materialized identifiers and the total match count.
    """
    images: list[str] = []
    count = 0
    for entry in corpus:
        if entry.profile is None:
            continue
        if not query_matches(entry.profile, query):
            continue
        count += 1
        if len(images) < max_results:
            images.append(entry.image_id)
    return SearchResult(images=tuple(images), count=count)

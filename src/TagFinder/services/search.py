"""Search service: query validation and timed corpus scans."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from TagFinder.core.models import Corpus, SearchResult
from TagFinder.core.query import TagQuery
from TagFinder.engine.search import search as search_corpus
from TagFinder.query.parser import parse_query, split_tokens
from TagFinder.utils.log import log

if TYPE_CHECKING:
    from TagFinder.storage.tags import TagDictionary


class EmptyQueryError(ValueError):
    """Raised when a query string has no usable tags."""


def parse_request(raw: str, name: str | None = None) -> TagQuery:
    """Parse a raw query string, rejecting empty queries.

    Args:
        raw: Raw query string.
        name: Optional display name.

    Returns:
        Parsed query.

    Raises:
        EmptyQueryError: If the string holds no tokens, or only an
            unterminated group.
    """
    if not split_tokens(raw):
        raise EmptyQueryError("Tags cannot be empty")
    query = parse_query(raw, name=name)
    if not query.terms:
        raise EmptyQueryError(f"Query has no complete terms: {raw!r}")
    return query


@dataclass(frozen=True, slots=True)
class ImageSearchService:
    """Runs tag queries against a loaded corpus.

    The service holds no mutable state, so one instance can serve
    concurrent callers.
    """

    corpus: Corpus
    max_results: int = 10000

    def parse(self, raw: str, name: str | None = None) -> TagQuery:
        return parse_request(raw, name=name)

    def search(self, query: TagQuery | str, *, max_results: int | None = None) -> SearchResult:
        """Run a query over the corpus.

        Args:
            query: Parsed query, or a raw string parsed with `parse_request`.
            max_results: Override of the configured result cap.

        Returns:
            Matching identifiers (capped) and the total match count.
        """
        if isinstance(query, str):
            query = parse_request(query)
        limit = self.max_results if max_results is None else max_results

        log.debug("Search terms: %s", query.terms)
        started = time.perf_counter()
        result = search_corpus(self.corpus, query, limit)
        elapsed_ms = (time.perf_counter() - started) * 1000
        log.info(
            "Search tags=%r matched=%d returned=%d in %.1f ms",
            query.raw,
            result.count,
            len(result.images),
            elapsed_ms,
        )
        if result.truncated:
            log.info("Result list capped at %d images", limit)
        return result


def validate_query(query: TagQuery, dictionary: TagDictionary) -> list[str]:
    """Return tag names of ``query`` that are not in ``dictionary``."""
    return dictionary.unknown(query.tag_names())

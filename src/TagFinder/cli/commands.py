"""Command implementations for TagFinder CLI.

Encapsulates command logic, separated from CLI parameter handling and
resource setup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from TagFinder.core.query import TagQuery
from TagFinder.renderers import OutputWriter
from TagFinder.services.search import ImageSearchService, validate_query
from TagFinder.storage.tags import TagDictionary
from TagFinder.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Runs every query and hands the results to the output writer."""

    search_service: ImageSearchService
    queries: Sequence[TagQuery]
    output_writer: OutputWriter
    dictionary: TagDictionary | None = None
    max_results: int | None = None

    def execute(self) -> None:
        multiple = len(self.queries) > 1

        for idx, query in enumerate(self.queries, start=1):
            if multiple:
                log.info("=== Query %d/%d ===", idx, len(self.queries))
            if query.name:
                log.info("name=%s", query.name)
            log.info("tags=%s", query.raw)

            if self.dictionary is not None:
                unknown = validate_query(query, self.dictionary)
                if unknown:
                    log.warning("Unknown tags in query: %s", ", ".join(unknown))

            result = self.search_service.search(query, max_results=self.max_results)
            self.output_writer.write_query_result(result, query)


@dataclass(slots=True)
class TagsCommand:
    """Lists known tags containing a keyword."""

    dictionary: TagDictionary
    keyword: str
    limit: int | None = None

    def execute(self) -> list[str]:
        tags = self.dictionary.filter(self.keyword, limit=self.limit)
        log.info("Tags matching %r: %d", self.keyword, len(tags))
        for tag in tags:
            translation = self.dictionary.translate(tag)
            if translation:
                log.info("%s (%s)", tag, translation)
            else:
                log.info("%s", tag)
        return tags

"""Application services for TagFinder.

Provides the search and image-info services and a factory for wiring them
from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from TagFinder.services.info import ImageInfo, TagDetail, describe_image
from TagFinder.services.search import EmptyQueryError, ImageSearchService, parse_request, validate_query

if TYPE_CHECKING:
    from TagFinder.config import AppConfig
    from TagFinder.core.models import Corpus


def create_search_service(config: AppConfig, corpus: Corpus) -> ImageSearchService:
    """Create a search service over ``corpus`` with the configured cap."""
    return ImageSearchService(corpus=corpus, max_results=config.search.max_results)


__all__ = [
    "EmptyQueryError",
    "ImageInfo",
    "ImageSearchService",
    "TagDetail",
    "create_search_service",
    "describe_image",
    "parse_request",
    "validate_query",
]

"""Search domain configuration and saved queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from TagFinder.config.common import (
    expect_int,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)
from TagFinder.core.query import TagQuery
from TagFinder.query.parser import parse_query

_QUERY_KEYS = {"NAME", "TAGS"}


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search limits and saved queries.

    Attributes:
        max_results: Cap on identifiers materialized per search.
        page_size: Number of identifiers shown per console page.
        queries: Saved queries run when the CLI gets none.
    """

    max_results: int
    page_size: int
    queries: tuple[TagQuery, ...]


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If a saved query is malformed.
    """
    section = get_section(raw, "search", required=False)

    queries_obj = raw.get("queries")
    if queries_obj is None:
        queries_obj = []
    if not isinstance(queries_obj, list):
        raise TypeError("queries must be a list")
    queries = tuple(parse_saved_query(item, f"queries[{idx}]") for idx, item in enumerate(queries_obj))

    return SearchConfig(
        max_results=expect_int(get_optional_value(section, "max_results", 10000), "search.max_results"),
        page_size=expect_int(get_optional_value(section, "page_size", 20), "search.page_size"),
        queries=queries,
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    if config.max_results <= 0:
        raise ValueError("search.max_results must be positive")
    if config.page_size <= 0:
        raise ValueError("search.page_size must be positive")


def parse_saved_query(value: Any, config_key: str) -> TagQuery:
    """Parse a ``{NAME, TAGS}`` mapping into a `TagQuery`.

    A bare string is accepted as the TAGS value of an unnamed query.

    Args:
        value: Query mapping or string.
        config_key: Full key path used in error messages.

    Returns:
        Parsed query.

    Raises:
        TypeError: If query shape/types are invalid.
        ValueError: If keys are unknown or the query has no terms.
    """
    if isinstance(value, str):
        value = {"TAGS": value}
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object or a string")

    unknown = {str(k) for k in value.keys()} - _QUERY_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    name = None
    if "NAME" in value:
        name = expect_str(value["NAME"], f"{config_key}.NAME").strip() or None

    tags = expect_str(get_required_value(value, "TAGS", f"{config_key}.TAGS"), f"{config_key}.TAGS")
    query = parse_query(tags, name=name)
    if not query.terms:
        raise ValueError(f"{config_key}.TAGS must include at least one tag")
    return query

"""JSON output.

`render_json` produces the ``{"images": [...], "count": n}`` payload of one
search; `JsonFileWriter` collects every query of a run into one file.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from TagFinder.core.models import SearchResult
from TagFinder.core.query import GroupTerm, TagQuery, TagTerm
from TagFinder.renderers.base import OutputWriter
from TagFinder.utils.log import log


def render_json(result: SearchResult) -> dict[str, Any]:
    """Render a search result into its JSON payload."""
    return {"images": list(result.images), "count": result.count}


def _term_payload(term: TagTerm) -> dict[str, Any]:
    return {"tag": term.name, "min_score": term.min_score, "negated": term.negated}


def render_query(query: TagQuery) -> dict[str, Any]:
    """Render a parsed query, groups as ``{"any": [...]}``."""
    terms: list[dict[str, Any]] = []
    for term in query.terms:
        if isinstance(term, GroupTerm):
            terms.append({"any": [_term_payload(member) for member in term.members]})
        else:
            terms.append(_term_payload(term))
    return {"name": query.name, "tags": query.raw, "terms": terms}


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict[str, Any]] = []
        self.output_path: Path | None = None

    def write_query_result(self, result: SearchResult, query: TagQuery) -> None:
        self.all_results.append({"query": render_query(query), **render_json(result)})

    def finalize(self, action: str) -> None:
        """Write accumulated results to ``<base_dir>/json/<action>_<timestamp>.json``."""
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.output_path = self.output_dir / f"{action}_{timestamp}.json"
        self.output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", self.output_path)

"""Console text output.

Search results are shown one page at a time; image details as a tag list.
"""

from __future__ import annotations

from typing import Sequence

from TagFinder.core.models import SearchResult
from TagFinder.core.query import TagQuery
from TagFinder.renderers.base import OutputWriter, query_label
from TagFinder.services.info import ImageInfo
from TagFinder.utils.log import log


def paginate(images: Sequence[str], page: int, page_size: int) -> tuple[Sequence[str], int, int]:
    """Slice one page out of ``images``.

    Args:
        images: Identifiers to page through.
        page: Requested 1-based page; clamped into the valid range.
        page_size: Identifiers per page.

    Returns:
        Tuple of (page items, effective page, total pages). An empty list
        has a single empty page.
    """
    total_pages = max(1, -(-len(images) // page_size))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * page_size
    return images[start:start + page_size], page, total_pages


def render_text(result: SearchResult, *, page: int = 1, page_size: int = 20) -> str:
    """Render one page of a search result as text.

    Args:
        result: Search result.
        page: 1-based page number.
        page_size: Identifiers per page.

    Returns:
        A formatted string ready to be printed.
    """
    items, page, total_pages = paginate(result.images, page, page_size)
    lines = [f"Found {result.count} images (showing {len(result.images)}), page {page}/{total_pages}"]
    offset = (page - 1) * page_size
    for idx, image_id in enumerate(items, start=offset + 1):
        lines.append(f"{idx}. {image_id}")
    return "\n".join(lines) + "\n"


def render_info(info: ImageInfo) -> str:
    """Render image details as text, one tag per line."""
    lines = [info.image_id]
    if info.title:
        lines.append(f"   Source: {info.title}")
    if not info.tags:
        lines.append("   (no tags)")
    for detail in info.tags:
        label = f"{detail.tag} ({detail.translation})" if detail.translation else detail.tag
        lines.append(f"   [{detail.category_name}] {label} {detail.score:.4f}")
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write one page of each result to the console via logging."""

    def __init__(self, *, page: int = 1, page_size: int = 20) -> None:
        self.page = page
        self.page_size = page_size

    def write_query_result(self, result: SearchResult, query: TagQuery) -> None:
        log.info("=== %s ===", query_label(query))
        for line in render_text(result, page=self.page, page_size=self.page_size).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""

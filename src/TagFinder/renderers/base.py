"""Base classes for output writers.

Separates command control flow from how search results are presented.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from TagFinder.core.models import SearchResult
from TagFinder.core.query import TagQuery


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_query_result(self, result: SearchResult, query: TagQuery) -> None:
        """Write the result of a single query.

        Args:
            result: Search result to present.
            query: The query that produced it.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'search').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_query_result(self, result: SearchResult, query: TagQuery) -> None:
        for writer in self.writers:
            writer.write_query_result(result, query)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)


def query_label(query: TagQuery) -> str:
    """Return the query name, falling back to its raw text."""
    if query.name:
        return query.name
    return query.raw or "query"

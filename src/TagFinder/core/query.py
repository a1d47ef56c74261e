from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Union


@dataclass(frozen=True, slots=True)
class TagTerm:
    """Single tag condition.

    Attributes:
        name: Normalized tag name (lowercase, spaces replaced by underscores).
        min_score: Minimum score; 0 means presence only.
        negated: Whether the condition excludes the tag instead of requiring it.
    """

    name: str
    min_score: float = 0.0
    negated: bool = False


@dataclass(frozen=True, slots=True)
class GroupTerm:
    """Bracketed OR-group of tag conditions."""

    members: Sequence[TagTerm] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))


Term = Union[TagTerm, GroupTerm]


@dataclass(frozen=True, slots=True)
class TagQuery:
    """Parsed tag query; top-level terms are AND-combined.

    Attributes:
        terms: Terms in source order.
        raw: Query text the terms were parsed from.
        name: Optional query name for display.
    """

    terms: Sequence[Term] = ()
    raw: str = ""
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))

    def conditions(self) -> Iterator[TagTerm]:
        """Yield every tag condition, group members included, in order."""
        for term in self.terms:
            if isinstance(term, GroupTerm):
                yield from term.members
            else:
                yield term

    def tag_names(self) -> list[str]:
        return [condition.name for condition in self.conditions()]

    def __len__(self) -> int:
        return len(self.terms)

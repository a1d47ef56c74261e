from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import IntEnum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional


class Category(IntEnum):
    """Tag categories as emitted by the tagging pipeline."""

    GENERAL = 0
    ARTIST = 1
    COPYRIGHT = 3
    CHARACTER = 4
    META = 5
    RATING = 9


@dataclass(frozen=True, slots=True)
class TagProfile:
    """Sparse per-image tag scores, grouped by category.

    A tag missing from every category is unknown, not a zero score.

    Attributes:
        categories: Mapping of category id to a mapping of tag name to score.
    """

    categories: Mapping[int, Mapping[str, float]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {
            int(category): MappingProxyType(dict(tags))
            for category, tags in self.categories.items()
        }
        object.__setattr__(self, "categories", MappingProxyType(frozen))

    @classmethod
    def from_pairs(cls, items: Iterable[tuple[int, str, float]]) -> TagProfile:
        """Build a profile from ``(category, tag, score)`` triples.

        A repeated tag inside the same category keeps the last score.
        """
        grouped: dict[int, dict[str, float]] = {}
        for category, tag, score in items:
            grouped.setdefault(int(category), {})[tag] = float(score)
        return cls(grouped)

    def score(self, tag: str) -> Optional[float]:
        """Return the score of ``tag`` from the first category holding it."""
        for tags in self.categories.values():
            if tag in tags:
                return tags[tag]
        return None

    def found(self, tag: str, min_score: float = 0.0) -> bool:
        """Return True if some category holds ``tag`` at or above ``min_score``.

        ``min_score == 0`` means presence only, without a threshold.
        """
        for tags in self.categories.values():
            if tag not in tags:
                continue
            if min_score == 0 or tags[tag] >= min_score:
                return True
        return False

    def items(self) -> Iterator[tuple[int, str, float]]:
        for category, tags in self.categories.items():
            for tag, score in tags.items():
                yield category, tag, score

    def __len__(self) -> int:
        return sum(len(tags) for tags in self.categories.values())


@dataclass(frozen=True, slots=True)
class CorpusEntry:
    """One image of the corpus.

    Attributes:
        image_id: Image identifier returned in search results.
        profile: Tag profile, or None when the image has no known tags.
    """

    image_id: str
    profile: Optional[TagProfile] = None


@dataclass(frozen=True, slots=True)
class Corpus:
    """Ordered, read-only collection of corpus entries."""

    entries: tuple[CorpusEntry, ...] = ()
    _index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        object.__setattr__(self, "entries", entries)
        index: dict[str, int] = {}
        for position, entry in enumerate(entries):
            index.setdefault(entry.image_id, position)
        object.__setattr__(self, "_index", MappingProxyType(index))

    def get(self, image_id: str) -> Optional[CorpusEntry]:
        position = self._index.get(image_id)
        return None if position is None else self.entries[position]

    @property
    def profiled(self) -> int:
        """Number of entries that carry a tag profile."""
        return sum(1 for entry in self.entries if entry.profile is not None)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CorpusEntry]:
        return iter(self.entries)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of one search.

    Attributes:
        images: Matching identifiers in corpus order, at most the configured cap.
        count: Total number of matches in the corpus, including those not materialized.
    """

    images: tuple[str, ...]
    count: int

    @property
    def truncated(self) -> bool:
        return self.count > len(self.images)

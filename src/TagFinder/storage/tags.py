"""Known-tag dictionary with translations."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from TagFinder.query.normalize import normalize_tag_name
from TagFinder.utils.log import log


@dataclass(frozen=True, slots=True)
class TagDictionary:
    """Known tag names, in file order, with their translations.

    Attributes:
        translations: Mapping of normalized tag name to translated label
            (may be empty).
    """

    translations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized: dict[str, str] = {}
        for tag, translation in self.translations.items():
            normalized.setdefault(normalize_tag_name(tag), translation)
        object.__setattr__(self, "translations", MappingProxyType(normalized))

    @classmethod
    def from_csv(cls, path: Path) -> TagDictionary:
        """Load the tag CSV: column 0 is the tag, column 1 its translation.

        Raises:
            OSError: If the file cannot be read.
        """
        translations: dict[str, str] = {}
        with path.open(encoding="utf-8", newline="") as fh:
            for record in csv.reader(fh):
                if not record or not record[0].strip():
                    continue
                tag = normalize_tag_name(record[0].strip())
                translations.setdefault(tag, record[1].strip() if len(record) > 1 else "")
        log.info("Loaded %d tags from %s", len(translations), path)
        return cls(translations)

    def filter(self, keyword: str, *, limit: int | None = None) -> list[str]:
        """Return known tags containing ``keyword``, in file order."""
        needle = normalize_tag_name(keyword.strip())
        matches: list[str] = []
        for tag in self.translations:
            if needle in tag:
                matches.append(tag)
                if limit is not None and len(matches) >= limit:
                    break
        return matches

    def translate(self, tag: str) -> str | None:
        """Return the translation of ``tag``, or None when unknown or untranslated."""
        return self.translations.get(tag) or None

    def unknown(self, names: Iterable[str]) -> list[str]:
        """Return names not present in the dictionary, without duplicates."""
        missing: list[str] = []
        for name in names:
            if name not in self.translations and name not in missing:
                missing.append(name)
        return missing

    def __contains__(self, tag: object) -> bool:
        return tag in self.translations

    def __len__(self) -> int:
        return len(self.translations)

"""Per-image tag file parsing.

Two on-disk formats are understood:

- ``.txt``: one ``<tag> <score> [<category>]`` per line, whitespace separated;
  the category defaults to general.
- ``.json``: ``{"<category>": {"<tag>": <score>, ...}, ...}`` where the
  category is an id (``"4"``) or a name (``"character"``).

Tag names are normalized the same way query tokens are.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from TagFinder.core.models import Category, TagProfile
from TagFinder.query.normalize import normalize_tag_name
from TagFinder.utils.log import log

PROFILE_SUFFIXES = (".txt", ".json")


def parse_profile_text(text: str, *, source: str = "<text>") -> TagProfile:
    """Parse the whitespace-separated tag file format.

    Malformed lines are skipped with a warning.
    """
    items: list[tuple[int, str, float]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) not in (2, 3):
            log.warning("Skipping malformed tag line %s:%d: %r", source, lineno, line)
            continue
        try:
            score = float(parts[1])
            category = int(parts[2]) if len(parts) == 3 else int(Category.GENERAL)
        except ValueError:
            log.warning("Skipping malformed tag line %s:%d: %r", source, lineno, line)
            continue
        items.append((category, normalize_tag_name(parts[0]), score))
    return TagProfile.from_pairs(items)


def _parse_category(key: Any) -> int | None:
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    text = str(key).strip()
    if text.lstrip("-").isdigit():
        return int(text)
    try:
        return int(Category[text.upper()])
    except KeyError:
        return None


def parse_profile_json(text: str, *, source: str = "<json>") -> TagProfile | None:
    """Parse the JSON tag file format.

    Returns:
        Parsed profile, or None when the document is not a category mapping.
        Unknown categories and non-numeric scores are skipped with a warning.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        log.warning("Invalid JSON tag file %s: %s", source, exc)
        return None
    if not isinstance(data, dict):
        log.warning("JSON tag file %s must hold an object", source)
        return None

    items: list[tuple[int, str, float]] = []
    for key, tags in data.items():
        category = _parse_category(key)
        if category is None or not isinstance(tags, dict):
            log.warning("Skipping category %r in %s", key, source)
            continue
        for tag, score in tags.items():
            if isinstance(score, bool) or not isinstance(score, (int, float)):
                log.warning("Skipping tag %r in %s: score must be a number", tag, source)
                continue
            items.append((category, normalize_tag_name(str(tag)), float(score)))
    return TagProfile.from_pairs(items)


def read_profile(path: Path) -> TagProfile | None:
    """Read a tag file, choosing the parser from the suffix.

    Returns:
        The profile, or None when the file is missing or unreadable.
    """
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Failed to open tag file %s: %s", path, exc)
        return None
    if path.suffix.lower() == ".json":
        return parse_profile_json(text, source=str(path))
    return parse_profile_text(text, source=str(path))


def find_profile_file(stem: Path) -> Path | None:
    """Return the first existing tag file for ``stem`` across known suffixes."""
    for suffix in PROFILE_SUFFIXES:
        candidate = stem.with_name(stem.name + suffix)
        if candidate.is_file():
            return candidate
    return None

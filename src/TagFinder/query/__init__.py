"""Tag query language: token normalization and parsing."""

from __future__ import annotations

from TagFinder.query.normalize import normalize_tag_name, normalize_term
from TagFinder.query.parser import parse_query, parse_tokens, scan_tokens, split_tokens

__all__ = [
    "normalize_tag_name",
    "normalize_term",
    "parse_query",
    "parse_tokens",
    "scan_tokens",
    "split_tokens",
]

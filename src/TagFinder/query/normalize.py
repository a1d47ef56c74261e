"""Tag token normalization.

Turns one raw query token into a `TagTerm`:

- a leading ``-`` negates the condition
- a trailing ``:<number>`` sets the minimum score
- the rest is the tag name, lowercased with spaces replaced by ``_``

Any input is accepted. A ``:`` suffix that is not a number stays part of the
tag name, so ``foo:bar`` looks up the literal tag ``foo:bar``.
"""

from __future__ import annotations

import re

from TagFinder.core.query import TagTerm

_SCORE_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def normalize_tag_name(name: str) -> str:
    """Canonicalize a tag name for lookup."""
    return name.lower().replace(" ", "_")


def parse_score(text: str) -> float | None:
    """Parse a score suffix, or return None when it is not a plain number."""
    if not _SCORE_RE.fullmatch(text):
        return None
    return float(text)


def normalize_term(token: str) -> TagTerm:
    """Normalize one raw token into a tag condition.

    Args:
        token: Raw token with surrounding whitespace already removed.

    Returns:
        The normalized condition.
    """
    negated = token.startswith("-")
    text = token[1:] if negated else token

    name = text
    min_score = 0.0
    head, sep, tail = text.rpartition(":")
    if sep:
        score = parse_score(tail)
        if score is not None:
            name = head
            min_score = score

    return TagTerm(name=normalize_tag_name(name), min_score=min_score, negated=negated)

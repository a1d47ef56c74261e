"""Tag query parser.

Query grammar, informally::

    query  := token ("," token)*
    token  := tag | "[" tag ("," tag)* "]"
    tag    := ["-"] name [":" score]

Top-level tokens are AND-combined; members of a bracketed group are
OR-combined. Whitespace around tokens is ignored.

Two tokenizers are provided. `split_tokens` is the plain comma split that
breaks groups apart; `scan_tokens` keeps each group in one token.
`parse_tokens` accepts either stream and rebuilds groups that were split.
"""

from __future__ import annotations

from typing import Iterable

from TagFinder.core.query import GroupTerm, TagQuery, Term
from TagFinder.query.normalize import normalize_term
from TagFinder.utils.log import log

_DELIMITER = ","
_GROUP_OPEN = "["
_GROUP_CLOSE = "]"


def split_tokens(raw: str) -> list[str]:
    """Split on commas, trim whitespace and drop empty tokens."""
    tokens: list[str] = []
    for part in raw.split(_DELIMITER):
        token = part.strip()
        if token:
            tokens.append(token)
    return tokens


def _is_open_group(text: str) -> bool:
    return text.startswith(_GROUP_OPEN) and not text.endswith(_GROUP_CLOSE)


def scan_tokens(raw: str) -> list[str]:
    """Split a raw query into tokens, keeping bracket groups whole.

    A token starting with ``[`` swallows following commas until the text
    collected so far ends with ``]``. A group still open at end of input is
    dropped.

    Args:
        raw: Raw query string.

    Returns:
        Trimmed, non-empty tokens in source order.
    """
    tokens: list[str] = []
    current: list[str] = []
    for char in raw:
        if char != _DELIMITER:
            current.append(char)
            continue
        text = "".join(current).strip()
        if _is_open_group(text):
            current.append(char)
            continue
        if text:
            tokens.append(text)
        current = []

    text = "".join(current).strip()
    if _is_open_group(text):
        log.debug("Dropping unterminated tag group: %s", text)
    elif text:
        tokens.append(text)
    return tokens


def _group_members(buffer: str) -> GroupTerm:
    body = buffer[len(_GROUP_OPEN):]
    if body.endswith(_GROUP_CLOSE):
        body = body[: -len(_GROUP_CLOSE)]
    members = [normalize_term(part.strip()) for part in body.split(_DELIMITER) if part.strip()]
    return GroupTerm(members=tuple(members))


def parse_tokens(tokens: Iterable[str]) -> tuple[Term, ...]:
    """Build terms from a token stream, reassembling split bracket groups.

    Args:
        tokens: Trimmed, non-empty tokens in source order.

    Returns:
        Terms in source order. A group left open when tokens run out
        contributes no term.
    """
    terms: list[Term] = []
    group_buffer: str | None = None
    for token in tokens:
        if group_buffer is None and token.startswith(_GROUP_OPEN):
            group_buffer = token
        elif group_buffer is not None:
            group_buffer = f"{group_buffer}{_DELIMITER}{token}"
        else:
            terms.append(normalize_term(token))
            continue

        if group_buffer.endswith(_GROUP_CLOSE):
            terms.append(_group_members(group_buffer))
            group_buffer = None

    if group_buffer is not None:
        log.debug("Dropping unterminated tag group: %s", group_buffer)
    return tuple(terms)


def parse_query(raw: str, name: str | None = None) -> TagQuery:
    """Parse a raw query string into a `TagQuery`.

    Args:
        raw: Raw query string, e.g. ``"1girl, [cat ears, dog ears], -hat:0.5"``.
        name: Optional display name.

    Returns:
        Parsed query. Never raises; malformed pieces degrade to literal tags.
    """
    return TagQuery(terms=parse_tokens(scan_tokens(raw)), raw=raw, name=name)

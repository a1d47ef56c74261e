"""Match evaluation of parsed tag queries against one tag profile.

- a plain term requires the tag at or above its minimum score
- a negated term requires the tag to be absent or below its minimum score
- a group is true if any member is true; an empty group is false
- a query is true if every top-level term is true
"""

from __future__ import annotations

from TagFinder.core.models import TagProfile
from TagFinder.core.query import GroupTerm, TagQuery, TagTerm, Term


def condition_matches(profile: TagProfile, term: TagTerm) -> bool:
    hit = profile.found(term.name, term.min_score)
    return not hit if term.negated else hit


def term_matches(profile: TagProfile, term: Term) -> bool:
    """Evaluate one top-level term against a profile."""
    if isinstance(term, GroupTerm):
        return any(condition_matches(profile, member) for member in term.members)
    return condition_matches(profile, term)


def query_matches(profile: TagProfile, query: TagQuery) -> bool:
    """Evaluate a whole query, stopping at the first failing term."""
    return all(term_matches(profile, term) for term in query.terms)

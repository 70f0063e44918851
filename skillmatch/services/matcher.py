# skillmatch/services/matcher.py
"""
Skill-to-job matching.

Pure functions only: callers load the user's skills and the active catalog
first, then hand both here. Nothing in this module touches the database.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from skillmatch.schemas.jobs import JobPosting, MatchResult
from skillmatch.utils.text_normalize import skill_key


def match_percentage(matched: int, total: int) -> int:
    """
    Percentage of `total` covered by `matched`, rounded half-up and capped at 100.
    A non-positive total gives 0.
    """
    if total <= 0 or matched <= 0:
        return 0
    pct = int(matched * 100 / total + 0.5)
    return min(pct, 100)


def matched_skills(user_keys: Iterable[str], required: Sequence[str]) -> List[str]:
    """Required skills present in `user_keys`, in the posting's order and spelling."""
    keys = set(user_keys)
    return [s for s in required if skill_key(s) in keys]


def match(
    user_skills: Iterable[str],
    postings: Sequence[JobPosting],
    basis: Optional[int] = None,
) -> List[MatchResult]:
    """
    Rank postings by how many of their required skills the user has.

    Args:
      user_skills: skill names, compared case-insensitively.
      postings: catalog snapshot; order is used to break ties.
      basis: fixed denominator for match_percentage. None uses each
        posting's own required-skill count.

    Returns:
      MatchResults for postings with at least one matched skill, sorted by
      match count descending (stable).
    """
    keys = {skill_key(s) for s in user_skills}
    keys.discard("")
    if not keys:
        return []

    results: List[MatchResult] = []
    for posting in postings:
        hits = matched_skills(keys, posting.required_skills)
        if not hits:
            continue
        total = basis if basis is not None else len(posting.required_skills)
        results.append(
            MatchResult(
                posting=posting,
                matched_skills=hits,
                match_percentage=match_percentage(len(hits), total),
            )
        )

    # list.sort is stable -> equal counts keep catalog order
    results.sort(key=lambda r: len(r.matched_skills), reverse=True)
    return results

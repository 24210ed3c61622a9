"""Filter opportunities and matches. No I/O; used by data access and the match service."""

from typing import List, Optional, Sequence, TypeVar

from craftlab_careers.schemas.match_result import MatchResult
from craftlab_careers.schemas.opportunity import Opportunity, OpportunityFilters

OpportunityT = TypeVar("OpportunityT", bound=Opportunity)


def filter_opportunities(
    opportunities: Sequence[OpportunityT],
    filters: Optional[OpportunityFilters],
) -> List[OpportunityT]:
    """
    Filter by exact type, case-insensitive location containment and exact industry.
    Does not mutate the input list. If filters is None or empty, return all opportunities.
    """
    if filters is None:
        return list(opportunities)
    location = (filters.location or "").lower()
    result = []
    for opp in opportunities:
        if filters.type and opp.type != filters.type:
            continue
        if location and location not in (opp.location or "").lower():
            continue
        if filters.industry and opp.industry != filters.industry:
            continue
        result.append(opp)
    return result


def filter_by_min_score(matches: Sequence[MatchResult], min_score: int) -> List[MatchResult]:
    """Keep matches scoring at least min_score, order preserved."""
    return [m for m in matches if m.match_score >= min_score]


def top_matches(matches: Sequence[MatchResult], limit: Optional[int]) -> List[MatchResult]:
    """
    First `limit` matches. None means no limit.
    Does not mutate the input list.
    """
    if limit is None:
        return list(matches)
    return list(matches[: max(0, limit)])

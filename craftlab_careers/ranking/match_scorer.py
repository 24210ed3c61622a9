"""Candidate-to-opportunity match scoring: weighted point components and stable ranking."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Tuple

from craftlab_careers.schemas.match_result import MatchResult
from craftlab_careers.schemas.opportunity import Opportunity
from craftlab_careers.schemas.profile import CandidateProfile, WorkType
from craftlab_careers.utils.helpers import all_skill_names
from craftlab_careers.utils.logger import get_logger

logger = get_logger(__name__)

# Points per component (sum is MAX_SCORE)
POINTS_TYPE = 25
POINTS_SKILLS = 35
POINTS_LOCATION = 15
POINTS_FLEXIBLE = 10
POINTS_WORK_TYPE = 15
POINTS_INDUSTRY = 10
MAX_SCORE = 100

MAX_REASONS = 4
TYPE_REASON_THRESHOLD = 15
DEFAULT_SKILL_MATCH_PERCENTAGE = 50.0

FLEXIBLE_WORK_TYPES = (WorkType.REMOTE.value, WorkType.HYBRID.value)

# (percentage floor, reason); first floor reached wins
SKILL_MATCH_LEVELS: Tuple[Tuple[float, str], ...] = (
    (80.0, "Excellent skills alignment"),
    (60.0, "Good skills match"),
    (40.0, "Moderate skills overlap"),
)

# user type -> opportunity type -> (points, reason). Tuned constants, keep as is.
TYPE_COMPATIBILITY: Dict[str, Dict[str, Tuple[int, str]]] = {
    "attachee": {
        "attachment": (25, "Perfect match for industrial attachment"),
        "internship": (20, "Great opportunity for practical experience"),
        "apprenticeship": (15, "Good for hands-on learning"),
        "volunteer": (10, "Valuable for community experience"),
        "full-time": (5, "Consider after gaining more experience"),
    },
    "intern": {
        "internship": (25, "Perfect internship opportunity"),
        "attachment": (20, "Excellent for gaining experience"),
        "apprenticeship": (15, "Good for skill development"),
        "volunteer": (12, "Great for building portfolio"),
        "full-time": (8, "Future career opportunity"),
    },
    "apprentice": {
        "apprenticeship": (25, "Ideal apprenticeship program"),
        "internship": (18, "Good for structured learning"),
        "attachment": (15, "Practical experience opportunity"),
        "volunteer": (10, "Community engagement experience"),
        "full-time": (12, "Potential career path"),
    },
    "volunteer": {
        "volunteer": (25, "Perfect volunteer opportunity"),
        "internship": (15, "Professional development opportunity"),
        "apprenticeship": (12, "Skill-building opportunity"),
        "attachment": (10, "Academic credit opportunity"),
        "full-time": (8, "Consider for career transition"),
    },
}
DEFAULT_TYPE_MATCH: Tuple[int, str] = (5, "General opportunity match")


def type_compatibility(user_type: Optional[str], opportunity_type: Optional[str]) -> Tuple[int, str]:
    """Table lookup; unknown pairs get DEFAULT_TYPE_MATCH."""
    return TYPE_COMPATIBILITY.get(user_type or "", {}).get(opportunity_type or "", DEFAULT_TYPE_MATCH)


def skills_match(profile: CandidateProfile, opportunity: Opportunity) -> Tuple[float, List[str]]:
    """
    Bidirectional case-insensitive substring match of required skills against candidate skills.
    "java" matches "javascript" and vice versa; that looseness is intended.
    Returns (points, reasons). No requirements counts as a 50% match.
    """
    user_skills = [s.lower() for s in all_skill_names(profile.skills)]
    required = [s.lower() for s in opportunity.requirements.skills]

    matched = [
        req for req in required
        if any(user in req or req in user for user in user_skills)
    ]

    if required:
        percentage = len(matched) / len(required) * 100
    else:
        percentage = DEFAULT_SKILL_MATCH_PERCENTAGE
    points = min(percentage / 100 * POINTS_SKILLS, POINTS_SKILLS)

    reasons: List[str] = []
    if matched:
        reasons.append(f"{len(matched)} of {len(required)} required skills match")
    for floor, reason in SKILL_MATCH_LEVELS:
        if percentage >= floor:
            reasons.append(reason)
            break
    return points, reasons


def location_fit(profile: CandidateProfile, opportunity: Opportunity) -> Tuple[int, Optional[str]]:
    """Location containment first; remote/hybrid only as a fallback."""
    if profile.location and profile.location in (opportunity.location or ""):
        return POINTS_LOCATION, "Location matches your preference"
    if opportunity.work_type in FLEXIBLE_WORK_TYPES:
        return POINTS_FLEXIBLE, "Offers flexible work arrangement"
    return 0, None


def work_type_fit(profile: CandidateProfile, opportunity: Opportunity) -> Tuple[int, Optional[str]]:
    preferred = profile.preferences.work_type if profile.preferences else None
    if preferred and preferred == opportunity.work_type:
        return POINTS_WORK_TYPE, "Work type matches your preference"
    return 0, None


def industry_fit(profile: CandidateProfile, opportunity: Opportunity) -> Tuple[int, Optional[str]]:
    industries = profile.preferences.industries if profile.preferences else []
    if opportunity.industry is not None and opportunity.industry in industries:
        return POINTS_INDUSTRY, "Industry aligns with your interests"
    return 0, None


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_opportunity(profile: CandidateProfile, opportunity: Opportunity) -> MatchResult:
    """
    Score one opportunity for one candidate. Pure and deterministic.
    Components (type, skills, location, work type, industry) are summed, clamped to 100
    and rounded; reasons keep component order and are capped at MAX_REASONS.
    """
    reasons: List[str] = []

    type_points, type_reason = type_compatibility(profile.user_type, opportunity.type)
    if type_points > TYPE_REASON_THRESHOLD:
        reasons.append(type_reason)

    skill_points, skill_reasons = skills_match(profile, opportunity)
    reasons.extend(skill_reasons)

    total: float = type_points + skill_points
    for component in (location_fit, work_type_fit, industry_fit):
        points, reason = component(profile, opportunity)
        total += points
        if reason:
            reasons.append(reason)

    final = _round_half_up(min(total, MAX_SCORE))
    logger.debug(
        "Scored opportunity id=%s type=%s: %s (type=%s skills=%.1f)",
        opportunity.id, opportunity.type, final, type_points, skill_points,
    )
    return MatchResult.model_validate(
        {
            **opportunity.model_dump(),
            "match_score": final,
            "match_reasons": reasons[:MAX_REASONS],
        }
    )


def rank_opportunities(
    profile: CandidateProfile,
    opportunities: Sequence[Opportunity],
) -> List[MatchResult]:
    """
    Score every opportunity and return them sorted by match_score descending.
    Ties keep their input order (sorted() is stable).
    """
    if not opportunities:
        return []
    scored = [score_opportunity(profile, opp) for opp in opportunities]
    ranked = sorted(scored, key=lambda m: -m.match_score)
    logger.debug("Ranked %s opportunities for profile id=%s", len(ranked), profile.id)
    return ranked


class MatchScorer:
    """Stateless wrapper so callers can inject a scorer; see score_opportunity / rank_opportunities."""

    def score(self, profile: CandidateProfile, opportunity: Opportunity) -> MatchResult:
        return score_opportunity(profile, opportunity)

    def rank(self, profile: CandidateProfile, opportunities: Sequence[Opportunity]) -> List[MatchResult]:
        return rank_opportunities(profile, opportunities)

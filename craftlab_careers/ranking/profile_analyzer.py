"""Rule-based profile analysis: strengths, recommendations, completion score and skill gaps."""

from typing import Dict, List, Tuple

from craftlab_careers.schemas.match_result import ProfileAnalysis
from craftlab_careers.schemas.profile import CandidateProfile
from craftlab_careers.utils.helpers import all_skill_names, contains_ignore_case, extract_skill_names
from craftlab_careers.utils.logger import get_logger

logger = get_logger(__name__)

MAX_SKILL_GAPS = 5
COMMON_SKILLS = ("Communication", "Teamwork", "Problem Solving", "Time Management")
TECH_SKILLS = ("Git", "Testing", "Agile", "Cloud Computing")

USER_TYPE_STRENGTHS: Dict[str, str] = {
    "attachee": "Academic foundation ready for practical application",
    "intern": "Eager to learn and gain professional experience",
    "apprentice": "Hands-on learning approach and practical skills",
    "volunteer": "Community-minded with strong social impact focus",
}

USER_TYPE_RECOMMENDATIONS: Dict[str, Tuple[str, str]] = {
    "attachee": (
        "Focus on building practical project experience",
        "Consider industry-specific certifications",
    ),
    "intern": (
        "Build a strong portfolio showcasing your projects",
        "Network with professionals in your field",
    ),
    "apprentice": (
        "Seek mentorship opportunities",
        "Document your hands-on learning journey",
    ),
    "volunteer": (
        "Highlight your community impact and leadership",
        "Consider skills-based volunteering opportunities",
    ),
}


def _strengths(profile: CandidateProfile, all_skills: List[str]) -> List[str]:
    strengths: List[str] = []
    if len(extract_skill_names(profile.skills.programming)) > 3:
        strengths.append("Strong technical programming skills")
    if len(extract_skill_names(profile.skills.design)) > 2:
        strengths.append("Creative design capabilities")
    if len(extract_skill_names(profile.skills.data)) > 2:
        strengths.append("Data analysis and insights")
    if len(all_skills) > 8:
        strengths.append("Diverse skill set across multiple domains")
    if profile.user_type in USER_TYPE_STRENGTHS:
        strengths.append(USER_TYPE_STRENGTHS[profile.user_type])
    return strengths


def _recommendations(profile: CandidateProfile, all_skills: List[str]) -> List[str]:
    recommendations: List[str] = []
    programming = extract_skill_names(profile.skills.programming)
    data = extract_skill_names(profile.skills.data)

    if programming and not contains_ignore_case(programming, "react"):
        recommendations.append("Consider learning React for modern web development")
    if data and not contains_ignore_case(data, "python"):
        recommendations.append("Add Python to your data analysis toolkit")
    if len(all_skills) < 5:
        recommendations.append("Expand your skill set to increase opportunities")
    recommendations.extend(USER_TYPE_RECOMMENDATIONS.get(profile.user_type or "", ()))
    return recommendations


def completion_score(profile: CandidateProfile) -> int:
    """
    Profile completeness out of 100:
    basic info 20, skills 40 (4 per skill), experience/education 20, preferences 20.
    """
    score = 0
    if profile.name:
        score += 5
    if profile.email:
        score += 5
    if profile.user_type:
        score += 10

    score += min(len(all_skill_names(profile.skills)) * 4, 40)

    if profile.experience:
        score += 10
    if profile.education:
        score += 10

    prefs = profile.preferences
    if profile.location:
        score += 5
    if prefs and prefs.work_type:
        score += 5
    if prefs and prefs.salary_range:
        score += 5
    if prefs and prefs.industries:
        score += 5
    return min(score, 100)


def _skill_gaps(profile: CandidateProfile, all_skills: List[str]) -> List[str]:
    gaps = [s for s in COMMON_SKILLS if not contains_ignore_case(all_skills, s)]
    if extract_skill_names(profile.skills.programming):
        gaps.extend(s for s in TECH_SKILLS if not contains_ignore_case(all_skills, s))
    return gaps[:MAX_SKILL_GAPS]


def analyze_profile(profile: CandidateProfile) -> ProfileAnalysis:
    """Deterministic analysis of one profile; no I/O."""
    all_skills = all_skill_names(profile.skills)
    analysis = ProfileAnalysis(
        strengths=_strengths(profile, all_skills),
        recommendations=_recommendations(profile, all_skills),
        completion_score=completion_score(profile),
        skill_gaps=_skill_gaps(profile, all_skills),
    )
    logger.debug("Analyzed profile id=%s completion=%s", profile.id, analysis.completion_score)
    return analysis

"""Derived scoring outputs: ranked matches and profile analysis."""

from typing import List

from pydantic import BaseModel, Field

from craftlab_careers.schemas.opportunity import Opportunity


class MatchResult(Opportunity):
    """Opportunity annotated with its compatibility score for one candidate."""

    match_score: int = Field(default=0, alias="matchScore", ge=0, le=100)
    match_reasons: List[str] = Field(default_factory=list, alias="matchReasons", max_length=4)


class ProfileAnalysis(BaseModel):
    strengths: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    completion_score: int = Field(default=0, ge=0, le=100)
    skill_gaps: List[str] = Field(default_factory=list)

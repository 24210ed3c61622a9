"""Schema exports."""

from .application import Application, ApplicationRequest, ApplicationStatus, Message
from .match_result import MatchResult, ProfileAnalysis
from .opportunity import Opportunity, OpportunityFilters, OpportunityType, Requirements
from .profile import CandidateProfile, Preferences, SkillEntry, Skills, UserType, WorkType

__all__ = [
    "Application",
    "ApplicationRequest",
    "ApplicationStatus",
    "CandidateProfile",
    "MatchResult",
    "Message",
    "Opportunity",
    "OpportunityFilters",
    "OpportunityType",
    "Preferences",
    "ProfileAnalysis",
    "Requirements",
    "SkillEntry",
    "Skills",
    "UserType",
    "WorkType",
]

"""Candidate profile schema: the seeker side of a match."""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class UserType(str, Enum):
    ATTACHEE = "attachee"
    INTERN = "intern"
    APPRENTICE = "apprentice"
    VOLUNTEER = "volunteer"


class WorkType(str, Enum):
    REMOTE = "remote"
    ONSITE = "onsite"
    HYBRID = "hybrid"


class SkillEntry(BaseModel):
    """Skill with a free-text description, as entered in the profile editor."""

    name: str = Field(default="", description="Skill name")
    description: str = Field(default="", description="How the skill was used")


SkillItem = Union[str, SkillEntry]

SKILL_CATEGORIES = ("programming", "design", "data", "business", "marketing", "other")


class Skills(BaseModel):
    """Skills grouped by category. Entries are kept as entered (no dedup, no case folding)."""

    model_config = ConfigDict(extra="ignore")

    programming: List[SkillItem] = Field(default_factory=list)
    design: List[SkillItem] = Field(default_factory=list)
    data: List[SkillItem] = Field(default_factory=list)
    business: List[SkillItem] = Field(default_factory=list)
    marketing: List[SkillItem] = Field(default_factory=list)
    other: List[SkillItem] = Field(default_factory=list, description="Uncategorized skills")


class Preferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    work_type: Optional[str] = Field(default=None, alias="workType", description="remote, onsite or hybrid")
    salary_range: Optional[str] = Field(default=None, alias="salaryRange")
    industries: List[str] = Field(default_factory=list, description="Industries the candidate is interested in")


class CandidateProfile(BaseModel):
    """Student-side profile. Only the matching-relevant attributes are modelled."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    user_type: Optional[str] = Field(default=None, alias="userType", description="attachee, intern, apprentice or volunteer")
    skills: Skills = Field(default_factory=Skills)
    experience: str = ""
    education: str = ""
    location: Optional[str] = None
    preferences: Optional[Preferences] = None

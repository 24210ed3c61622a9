"""Opportunity posting schema and listing filters."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OpportunityType(str, Enum):
    INTERNSHIP = "internship"
    ATTACHMENT = "attachment"
    APPRENTICESHIP = "apprenticeship"
    VOLUNTEER = "volunteer"
    FULL_TIME = "full-time"


class Requirements(BaseModel):
    skills: List[str] = Field(default_factory=list, description="Required skill names, in posting order")
    experience: str = ""
    education: str = ""


class Opportunity(BaseModel):
    """Role posted by an organization (internship, attachment, apprenticeship, volunteer, full-time)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    title: str = ""
    company: str = ""
    location: str = Field(default="", description="Free-text location, e.g. 'Nairobi, Kenya'")
    type: str = Field(default="", description="internship, attachment, apprenticeship, volunteer or full-time")
    salary: str = ""
    deadline: str = ""
    description: str = ""
    requirements: Requirements = Field(default_factory=Requirements)
    benefits: List[str] = Field(default_factory=list)
    work_type: str = Field(default="", alias="workType", description="remote, onsite or hybrid")
    industry: Optional[str] = None


class OpportunityFilters(BaseModel):
    """Optional listing filters; unset fields do not filter."""

    type: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None

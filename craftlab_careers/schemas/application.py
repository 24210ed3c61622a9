"""Application and message schemas exchanged with the hosted backend."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class ApplicationRequest(BaseModel):
    """What a candidate submits when applying to an opportunity."""

    user_id: str = Field(..., description="Applicant profile id")
    opportunity_id: str = Field(..., description="Target opportunity id")
    cover_letter: str = ""
    additional_info: str = ""


class Application(BaseModel):
    id: str
    user_id: str
    opportunity_id: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_date: Optional[str] = Field(default=None, description="ISO-8601 timestamp set by the backend")


class Message(BaseModel):
    """Direct message delivered to subscribers of the receiver."""

    id: str
    sender_id: str
    receiver_id: str
    content: str = ""
    created_at: str = Field(..., description="ISO-8601 timestamp; also the polling cursor")

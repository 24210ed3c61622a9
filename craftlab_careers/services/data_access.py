"""Data access: abstract backend capabilities, row mapping, and an in-memory implementation."""

import uuid
from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from craftlab_careers.schemas.application import Application, ApplicationRequest, ApplicationStatus, Message
from craftlab_careers.schemas.opportunity import Opportunity, OpportunityFilters
from craftlab_careers.schemas.profile import CandidateProfile
from craftlab_careers.services.filter_service import filter_opportunities
from craftlab_careers.utils.logger import get_logger

logger = get_logger(__name__)

MessageCallback = Callable[[Message], None]
Unsubscribe = Callable[[], None]


class DataAccessError(Exception):
    """Raised when the backend rejects a write."""


class DataAccess(ABC):
    """Backend capabilities the matching core needs. Inject an implementation; never use a global client."""

    @abstractmethod
    def fetch_profile(self, user_id: str) -> Optional[CandidateProfile]:
        """Profile by id, or None if it does not exist."""
        ...

    @abstractmethod
    def fetch_opportunities(self, filters: Optional[OpportunityFilters] = None) -> List[Opportunity]:
        """Opportunities, newest first, optionally filtered."""
        ...

    @abstractmethod
    def insert_application(self, request: ApplicationRequest) -> Application:
        """Store a pending application. Raises DataAccessError on failure."""
        ...

    @abstractmethod
    def subscribe_to_messages(self, user_id: str, callback: MessageCallback) -> Unsubscribe:
        """Call callback for each new message addressed to user_id. Returns an unsubscribe function."""
        ...


def profile_from_row(row: Dict[str, Any]) -> CandidateProfile:
    """Map a `profiles` row (snake_case columns, JSON skills/preferences) to a CandidateProfile."""
    skills = row.get("skills") or {}
    if isinstance(skills, list):
        skills = {"other": skills}
    return CandidateProfile(
        id=row.get("id"),
        name=row.get("name"),
        email=row.get("email"),
        user_type=row.get("user_type"),
        skills=skills,
        experience=row.get("experience") or "",
        education=row.get("education") or "",
        location=row.get("location"),
        preferences=row.get("preferences") or None,
    )


def opportunity_from_row(row: Dict[str, Any]) -> Opportunity:
    """Map an `opportunities` row to an Opportunity; missing JSON columns get empty defaults."""
    return Opportunity(
        id=str(row.get("id") or ""),
        title=row.get("title") or "",
        company=row.get("company") or "",
        location=row.get("location") or "",
        type=row.get("type") or "",
        salary=row.get("salary") or "",
        deadline=row.get("deadline") or "",
        description=row.get("description") or "",
        requirements=row.get("requirements") or {},
        benefits=row.get("benefits") or [],
        work_type=row.get("work_type") or "",
        industry=row.get("industry"),
    )


class InMemoryDataAccess(DataAccess):
    """Process-local backend. Opportunities are returned in insertion order, newest first."""

    def __init__(
        self,
        profiles: Optional[List[CandidateProfile]] = None,
        opportunities: Optional[List[Opportunity]] = None,
    ) -> None:
        self._profiles: Dict[str, CandidateProfile] = {p.id: p for p in (profiles or []) if p.id}
        self._opportunities: List[Opportunity] = list(opportunities or [])
        self._applications: List[Application] = []
        self._subscribers: Dict[str, List[MessageCallback]] = defaultdict(list)

    @property
    def applications(self) -> List[Application]:
        return list(self._applications)

    def add_profile(self, profile: CandidateProfile) -> None:
        if not profile.id:
            raise ValueError("profile.id is required")
        self._profiles[profile.id] = profile

    def add_opportunity(self, opportunity: Opportunity) -> None:
        self._opportunities.append(opportunity)

    def fetch_profile(self, user_id: str) -> Optional[CandidateProfile]:
        return self._profiles.get(user_id)

    def fetch_opportunities(self, filters: Optional[OpportunityFilters] = None) -> List[Opportunity]:
        newest_first = list(reversed(self._opportunities))
        return filter_opportunities(newest_first, filters)

    def insert_application(self, request: ApplicationRequest) -> Application:
        if not any(o.id == request.opportunity_id for o in self._opportunities):
            raise DataAccessError(f"Unknown opportunity: {request.opportunity_id}")
        application = Application(
            id=uuid.uuid4().hex,
            user_id=request.user_id,
            opportunity_id=request.opportunity_id,
            status=ApplicationStatus.PENDING,
            applied_date=datetime.now(timezone.utc).isoformat(),
        )
        self._applications.insert(0, application)
        return application

    def subscribe_to_messages(self, user_id: str, callback: MessageCallback) -> Unsubscribe:
        self._subscribers[user_id].append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers.get(user_id, []):
                self._subscribers[user_id].remove(callback)

        return unsubscribe

    def publish_message(self, message: Message) -> int:
        """Deliver message to the receiver's subscribers. Returns how many callbacks ran."""
        callbacks = list(self._subscribers.get(message.receiver_id, []))
        for cb in callbacks:
            cb(message)
        logger.debug("Delivered message %s to %s subscriber(s)", message.id, len(callbacks))
        return len(callbacks)

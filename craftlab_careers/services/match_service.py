"""Match service: fetch through DataAccess, score, filter; analysis and applications."""

from typing import List, Optional

from craftlab_careers.config import MAX_MATCHES, MIN_MATCH_SCORE
from craftlab_careers.ranking.match_scorer import MatchScorer
from craftlab_careers.ranking.profile_analyzer import analyze_profile
from craftlab_careers.schemas.application import Application, ApplicationRequest
from craftlab_careers.schemas.match_result import MatchResult, ProfileAnalysis
from craftlab_careers.schemas.opportunity import OpportunityFilters
from craftlab_careers.services.data_access import DataAccess, DataAccessError
from craftlab_careers.services.filter_service import filter_by_min_score, top_matches
from craftlab_careers.utils.logger import get_logger

logger = get_logger(__name__)


class MatchService:
    """Glue between the backend and the scorer. Holds no per-user state."""

    def __init__(
        self,
        data_access: DataAccess,
        scorer: Optional[MatchScorer] = None,
        max_matches: Optional[int] = MAX_MATCHES,
        min_score: int = MIN_MATCH_SCORE,
    ) -> None:
        self.data_access = data_access
        self.scorer = scorer or MatchScorer()
        self.max_matches = max_matches
        self.min_score = min_score

    def generate_matches(
        self,
        user_id: str,
        filters: Optional[OpportunityFilters] = None,
    ) -> List[MatchResult]:
        """Ranked matches for a user, best first; empty if the profile is missing."""
        profile = self.data_access.fetch_profile(user_id)
        if profile is None:
            logger.warning("No profile for user %s; skipping matching", user_id)
            return []
        opportunities = self.data_access.fetch_opportunities(filters)
        ranked = self.scorer.rank(profile, opportunities)
        kept = top_matches(filter_by_min_score(ranked, self.min_score), self.max_matches)
        logger.info(
            "Generated %s matches for user %s (%s opportunities scored)",
            len(kept), user_id, len(opportunities),
        )
        return kept

    def analyze(self, user_id: str) -> Optional[ProfileAnalysis]:
        profile = self.data_access.fetch_profile(user_id)
        if profile is None:
            logger.warning("No profile for user %s; skipping analysis", user_id)
            return None
        return analyze_profile(profile)

    def apply_to_opportunity(
        self,
        user_id: str,
        opportunity_id: str,
        cover_letter: str = "",
        additional_info: str = "",
    ) -> Optional[Application]:
        """Submit a pending application. Returns None if the backend rejects it."""
        request = ApplicationRequest(
            user_id=user_id,
            opportunity_id=opportunity_id,
            cover_letter=cover_letter,
            additional_info=additional_info,
        )
        try:
            application = self.data_access.insert_application(request)
        except DataAccessError as e:
            logger.error("Application by %s to %s failed: %s", user_id, opportunity_id, e)
            return None
        logger.info("User %s applied to opportunity %s", user_id, opportunity_id)
        return application

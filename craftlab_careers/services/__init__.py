"""Service exports."""

from .data_access import (
    DataAccess,
    DataAccessError,
    InMemoryDataAccess,
    opportunity_from_row,
    profile_from_row,
)
from .filter_service import filter_by_min_score, filter_opportunities, top_matches
from .match_service import MatchService
from .supabase_client import SupabaseDataAccess

__all__ = [
    "DataAccess",
    "DataAccessError",
    "InMemoryDataAccess",
    "SupabaseDataAccess",
    "MatchService",
    "profile_from_row",
    "opportunity_from_row",
    "filter_opportunities",
    "filter_by_min_score",
    "top_matches",
]

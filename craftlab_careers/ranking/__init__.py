"""Ranking: rule-based match scorer and profile analyzer."""

from craftlab_careers.ranking.match_scorer import MatchScorer, rank_opportunities, score_opportunity
from craftlab_careers.ranking.profile_analyzer import analyze_profile, completion_score

__all__ = ["MatchScorer", "score_opportunity", "rank_opportunities", "analyze_profile", "completion_score"]

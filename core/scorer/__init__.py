#!/usr/bin/env python3
"""
Scoring Module - Stage 2: Weighted Ranking.

Public API:
- ScoringService: Main ranking service
- CandidateMatch: Dataclass for ranked candidates
- persist_matches / get_cached_matches: match cache

- models.py: Data structures (ScoreBreakdown, RankingResult, CandidateMatch)
- ranking.py: Component scores, reasoning and confidence
- persistence.py: Match cache replacement
- service.py: ScoringService orchestrator
"""

from core.scorer.models import CandidateMatch, RankingResult, ScoreBreakdown
from core.scorer.service import ScoringService
from core.scorer.persistence import persist_matches, get_cached_matches

__all__ = [
    'ScoringService', 'CandidateMatch', 'RankingResult', 'ScoreBreakdown',
    'persist_matches', 'get_cached_matches'
]

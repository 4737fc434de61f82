#!/usr/bin/env python3
"""
Scoring Models - Data structures for ranking results.
"""

from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field, asdict
from datetime import datetime

from core.matcher.models import SkillResolution


@dataclass
class ScoreBreakdown:
    """Per-component points. Caps (defaults): 40 / 25 / 20 / 10 / 5."""
    skill_match: int = 0
    interview_quality: int = 0
    experience_match: int = 0
    github_quality: int = 0
    recency_bonus: int = 0

    @property
    def total(self) -> int:
        return (
            self.skill_match + self.interview_quality + self.experience_match
            + self.github_quality + self.recency_bonus
        )

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class RankingResult:
    """Stage 2 output for one candidate/job pair."""
    score: int
    breakdown: ScoreBreakdown
    reasoning: str
    confidence: str  # high|medium|low
    resolution: SkillResolution


@dataclass
class CandidateMatch:
    """Ranked candidate for a job, as returned to recruiters."""
    candidate_id: str
    candidate_name: str
    candidate_email: Optional[str]
    match_score: int
    reasoning: str
    confidence_level: str

    skills: List[str] = field(default_factory=list)
    matching_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    skill_match_score: int = 0

    interview_level: Optional[str] = None
    interview_score: Optional[int] = None
    experience_years: Optional[float] = None
    experience_match_score: int = 0

    github_analyzed: bool = False
    github_quality_score: int = 0
    quality_score: int = 0  # interview_quality + github_quality, used as tie-break

    target_role: Optional[str] = None
    location: Optional[str] = None
    last_active: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

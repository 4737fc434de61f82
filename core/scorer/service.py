#!/usr/bin/env python3
"""
Scoring Service - Stage 2: Weighted Multi-Factor Ranking.

Takes preliminary candidates from MatcherService and calculates final scores:
- Skill match (exact and alias matches, half credit for partial matches)
- Interview quality (average score weighted by highest level reached)
- Experience fit (distance from the ideal years of the job level)
- GitHub quality (notable project quality, GitHub-verified skills)
- Recency bonus (platform and GitHub activity)

Designed to run independently of the MatcherService; no I/O happens here.
"""

from typing import List, Optional
from datetime import datetime
import logging

from core.config_loader import ScorerConfig
from core.matcher.models import (
    CandidatePreliminary, CandidateRecord, JobRecord, SkillResolution
)
from core.matcher.skills import resolve_skills
from core.scorer.models import CandidateMatch, RankingResult, ScoreBreakdown
from core.scorer.ranking import (
    REASON_SEPARATOR,
    confidence_level,
    experience_match_score,
    github_quality_score,
    interview_quality_score,
    recency_bonus,
    skill_match_score,
)
from core.utils import round_half_up

logger = logging.getLogger(__name__)


class ScoringService:
    """
    Service for Stage 2: Ranking.

    All weights, caps and thresholds come from ScorerConfig.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def rank(
        self,
        candidate: CandidateRecord,
        job: JobRecord,
        now: Optional[datetime] = None,
        resolution: Optional[SkillResolution] = None,
    ) -> RankingResult:
        """
        Score one candidate against one job.

        Args:
            candidate: Candidate read model (any field may be absent)
            job: Validated job record
            now: Reference time for the recency bonus (default: now, UTC)
            resolution: Skill resolution from Stage 1, recomputed when omitted

        Returns:
            RankingResult with score in [0, 100]
        """
        if resolution is None:
            resolution = resolve_skills(candidate.skills, job.required_skills)

        skill_points, skill_reason = skill_match_score(
            resolution, len(job.required_skills), self.config
        )
        interview_points, interview_reason = interview_quality_score(candidate, self.config)
        experience_points, experience_reason = experience_match_score(candidate, job, self.config)
        github_points, github_reason = github_quality_score(
            candidate.github_data, resolution, self.config
        )
        recency_points, recency_reason = recency_bonus(candidate, self.config, now)

        breakdown = ScoreBreakdown(
            skill_match=skill_points,
            interview_quality=interview_points,
            experience_match=experience_points,
            github_quality=github_points,
            recency_bonus=recency_points,
        )
        reasons = [skill_reason, interview_reason, experience_reason, github_reason]
        if recency_reason:
            reasons.append(recency_reason)

        score = max(0, min(100, round_half_up(breakdown.total)))
        logger.debug(f"Candidate {candidate.id} vs job {job.id}: {score} {breakdown.to_dict()}")

        return RankingResult(
            score=score,
            breakdown=breakdown,
            reasoning=REASON_SEPARATOR.join(reasons),
            confidence=confidence_level(candidate, self.config),
            resolution=resolution,
        )

    def to_match(self, candidate: CandidateRecord, result: RankingResult) -> CandidateMatch:
        breakdown = result.breakdown
        return CandidateMatch(
            candidate_id=candidate.id,
            candidate_name=candidate.full_name or 'Anonymous',
            candidate_email=candidate.email,
            match_score=result.score,
            reasoning=result.reasoning,
            confidence_level=result.confidence,
            skills=list(candidate.skills),
            matching_skills=list(result.resolution.matching),
            missing_skills=list(result.resolution.missing),
            skill_match_score=breakdown.skill_match,
            interview_level=candidate.highest_level,
            interview_score=(
                round_half_up(candidate.avg_score) if candidate.avg_score is not None else None
            ),
            experience_years=candidate.experience_years,
            experience_match_score=breakdown.experience_match,
            github_analyzed=candidate.github_data is not None,
            github_quality_score=breakdown.github_quality,
            quality_score=breakdown.interview_quality + breakdown.github_quality,
            target_role=candidate.target_role,
            location=candidate.location,
            last_active=candidate.created_at,
        )

    def score_candidates(
        self,
        preliminary: List[CandidatePreliminary],
        job: JobRecord,
        limit: int = 20,
        now: Optional[datetime] = None,
    ) -> List[CandidateMatch]:
        """
        Rank Stage 1 survivors.

        Sorted by score, then by interview + GitHub quality, both descending.
        The sort is stable, so full ties keep the Stage 1 order.
        """
        matches = []
        for item in preliminary:
            result = self.rank(item.candidate, job, now=now, resolution=item.resolution)
            matches.append(self.to_match(item.candidate, result))

        matches.sort(key=lambda m: (m.match_score, m.quality_score), reverse=True)

        logger.info(f"Stage 2: ranked {len(matches)} candidates for job {job.id}, returning top {limit}")
        return matches[:limit]

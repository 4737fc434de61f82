"""Shared matching pipeline runner module.

This module contains the orchestration used by both main.py and the web
application: Stage 1 retrieval, Stage 2 ranking, match caching and GitHub
analysis, each inside a hiring unit of work.
"""

import time
import logging
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from datetime import datetime

from core.app_context import AppContext
from core.github.models import GitHubAnalysis
from core.matcher.models import JobRecord
from core.scorer.models import CandidateMatch
from core.scorer.persistence import persist_matches, get_cached_matches
from database.uow import hiring_uow


logger = logging.getLogger(__name__)


@dataclass
class MatchingPipelineResult:
    """Result of running the matching pipeline for one job."""
    job_id: str
    job_title: str
    matches: List[CandidateMatch] = field(default_factory=list)
    saved_count: int = 0
    execution_time: float = 0.0

    @property
    def matches_count(self) -> int:
        return len(self.matches)


def _match_job(
    ctx: AppContext,
    repo: Any,
    job_id: Any,
    limit: Optional[int],
    now: Optional[datetime]
) -> Tuple[JobRecord, List[CandidateMatch]]:
    limit = limit if limit is not None else ctx.config.matching.default_limit
    job, survivors = ctx.matcher_service.retrieve(repo, job_id)
    return job, ctx.scoring_service.score_candidates(survivors, job, limit=limit, now=now)


def find_matches(
    ctx: AppContext,
    repo: Any,
    job_id: Any,
    limit: Optional[int] = None,
    now: Optional[datetime] = None
) -> List[CandidateMatch]:
    """Two-stage matching for one job: retrieval filter, then weighted ranking.

    Raises:
        JobNotFoundException: Unknown job.
        InvalidInputException: Malformed job or candidate record.
    """
    return _match_job(ctx, repo, job_id, limit, now)[1]


def run_matching_pipeline(
    ctx: AppContext,
    job_id: Any,
    limit: Optional[int] = None,
    use_cache: bool = True,
    now: Optional[datetime] = None
) -> MatchingPipelineResult:
    """Run matching for a job and, when caching is enabled, replace its cached matches.

    Everything happens in one transaction: an exception anywhere leaves the
    previous cache untouched.
    """
    pipeline_start = time.time()

    logger.info("=" * 60)
    logger.info(f"STARTING MATCHING PIPELINE for job {job_id}")
    logger.info("=" * 60)

    cache_config = ctx.config.matching.cache

    with hiring_uow() as repo:
        job, matches = _match_job(ctx, repo, job_id, limit, now)

        saved_count = 0
        if use_cache and cache_config.enabled:
            saved_count = persist_matches(
                repo, job_id, matches, max_matches=cache_config.max_cached_matches
            )

    execution_time = time.time() - pipeline_start
    logger.info(
        f"=== MATCHING PIPELINE: {len(matches)} matches, {saved_count} cached "
        f"in {execution_time:.2f}s ==="
    )

    return MatchingPipelineResult(
        job_id=job.id,
        job_title=job.title,
        matches=matches,
        saved_count=saved_count,
        execution_time=execution_time,
    )


def load_cached_matches(ctx: AppContext, job_id: Any) -> Dict[str, Any]:
    """Cached rows of a job as plain dicts, highest score first."""
    with hiring_uow() as repo:
        job = ctx.matcher_service.load_job(repo, job_id)
        rows = get_cached_matches(repo, job_id)
        return {
            'job_title': job.title,
            'matches': [
                {
                    'candidate_id': str(row.candidate_id),
                    'match_score': row.match_score,
                    'reasoning': row.reasoning,
                    'confidence_level': row.confidence,
                    'created_at': row.created_at,
                    'candidate': {
                        'target_role': row.candidate.target_role,
                        'experience_years': row.candidate.experience_years,
                        'skills': row.candidate.skills or [],
                        'github_username': row.candidate.github_username,
                        'github_analyzed': row.candidate.github_data is not None,
                    },
                }
                for row in rows
            ],
        }


def run_github_analysis(
    ctx: AppContext,
    candidate_id: Any,
    access_token: Optional[str] = None
) -> GitHubAnalysis:
    """Analyze a candidate's GitHub repositories and store the result."""
    with hiring_uow() as repo:
        return ctx.github_analyzer.analyze_repositories(repo, candidate_id, access_token)


def get_github_analysis(ctx: AppContext, candidate_id: Any) -> Optional[GitHubAnalysis]:
    with hiring_uow() as repo:
        return ctx.github_analyzer.get_analysis(repo, candidate_id)


def clear_github_analysis(ctx: AppContext, candidate_id: Any) -> None:
    with hiring_uow() as repo:
        ctx.github_analyzer.clear_analysis(repo, candidate_id)

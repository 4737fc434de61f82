#!/usr/bin/env python3
"""
Persistence Operations - Match cache for recruiter views.

Matches of a job are replaced wholesale: the job row is locked, old rows are
deleted and the new top matches inserted inside the caller's transaction, so
concurrent readers see either the previous set or the new one, never neither.
"""

import logging
from typing import Any, List

from core.exceptions import JobNotFoundException
from core.scorer.models import CandidateMatch

logger = logging.getLogger(__name__)

MAX_CACHED_MATCHES = 50


def persist_matches(
    repo: Any,
    job_id: Any,
    matches: List[CandidateMatch],
    max_matches: int = MAX_CACHED_MATCHES
) -> int:
    """
    Replace the cached matches of a job with the highest-scored ``matches``.

    Does not commit; the unit of work does. Concurrent refreshes of the same
    job serialise on the row lock and the last committed writer wins.

    Returns:
        Number of rows inserted
    """
    job = repo.jobs.lock_for_update(job_id)
    if job is None:
        raise JobNotFoundException(f"Job posting {job_id} not found")

    top = sorted(matches, key=lambda m: m.match_score, reverse=True)[:max_matches]

    deleted = repo.matches.delete_matches_for_job(job.id)
    inserted = repo.matches.insert_matches(job.id, [
        {
            'candidate_id': match.candidate_id,
            'match_score': match.match_score,
            'reasoning': match.reasoning,
            'confidence': match.confidence_level,
        }
        for match in top
    ])

    logger.info(f"Match cache for job {job_id}: replaced {deleted} rows with {inserted}")
    return inserted


def get_cached_matches(repo: Any, job_id: Any) -> List[Any]:
    """Cached match rows of a job, highest score first."""
    return repo.matches.get_matches_for_job(job_id)

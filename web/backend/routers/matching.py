#!/usr/bin/env python3
"""
Matching endpoints - run candidate matching for a job and read the cache.
"""

import uuid
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException

from core.app_context import AppContext
from pipeline.runner import run_matching_pipeline, load_cached_matches
from ..dependencies import get_app_context
from ..models.responses import MatchingResponse, CachedMatchingResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matching", tags=["matching"])


def validate_job_id(job_id: Optional[str]) -> str:
    """Validate that the jobId query parameter is present and a UUID."""
    if not job_id:
        raise HTTPException(status_code=400, detail="Job ID is required")
    try:
        uuid.UUID(job_id)
        return job_id
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid jobId format: {job_id}. Must be a valid UUID."
        )


@router.post("", response_model=MatchingResponse)
def run_matching(
    job_id: Optional[str] = Query(default=None, alias="jobId", description="Job posting ID"),
    limit: Optional[int] = Query(default=None, ge=1, le=100, description="Maximum matches to return"),
    ctx: AppContext = Depends(get_app_context)
):
    """
    Match candidates against a job posting.

    Runs retrieval and ranking, replaces the cached matches of the job and
    returns the ranked list.
    """
    job_id = validate_job_id(job_id)
    result = run_matching_pipeline(ctx, job_id, limit=limit)

    return MatchingResponse(
        success=True,
        data={
            "job_title": result.job_title,
            "total_matches": result.matches_count,
            "matches": [match.to_dict() for match in result.matches],
        }
    )


@router.get("", response_model=CachedMatchingResponse)
def get_cached(
    job_id: Optional[str] = Query(default=None, alias="jobId", description="Job posting ID"),
    ctx: AppContext = Depends(get_app_context)
):
    """
    Get previously cached matches for a job.

    ``needs_refresh`` is set when no matches are cached yet.
    """
    job_id = validate_job_id(job_id)
    cached = load_cached_matches(ctx, job_id)
    matches = cached['matches']

    return CachedMatchingResponse(
        success=True,
        data={
            "job_title": cached['job_title'],
            "total_matches": len(matches),
            "matches": matches,
            "needs_refresh": not matches,
        }
    )

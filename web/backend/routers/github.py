#!/usr/bin/env python3
"""
GitHub endpoints - analyze a candidate's repositories and manage the stored analysis.
"""

import uuid
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Header, HTTPException

from core.app_context import AppContext
from pipeline.runner import (
    run_github_analysis,
    get_github_analysis,
    clear_github_analysis,
)
from ..dependencies import get_app_context
from ..models.responses import GitHubAnalysisResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/github", tags=["github"])


def validate_uuid(candidate_id: str) -> str:
    """Validate that candidate_id is a valid UUID format."""
    try:
        uuid.UUID(candidate_id)
        return candidate_id
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid candidate_id format: {candidate_id}. Must be a valid UUID."
        )


@router.post(
    "/analyze/{candidate_id}",
    response_model=GitHubAnalysisResponse,
    response_model_by_alias=False
)
def analyze(
    candidate_id: str,
    x_github_token: Optional[str] = Header(default=None),
    ctx: AppContext = Depends(get_app_context)
):
    """
    Analyze the candidate's GitHub profile.

    Uses the ``X-GitHub-Token`` header when given, else the configured token.
    The stored analysis and the candidate's skills are replaced.
    """
    validate_uuid(candidate_id)
    analysis = run_github_analysis(ctx, candidate_id, access_token=x_github_token)
    return GitHubAnalysisResponse(success=True, data=analysis)


@router.get(
    "/analysis/{candidate_id}",
    response_model=GitHubAnalysisResponse,
    response_model_by_alias=False
)
def get_analysis(
    candidate_id: str,
    ctx: AppContext = Depends(get_app_context)
):
    """Get the stored GitHub analysis of a candidate."""
    validate_uuid(candidate_id)
    analysis = get_github_analysis(ctx, candidate_id)
    if analysis is None:
        raise HTTPException(status_code=404, detail="No GitHub analysis for this candidate")
    return GitHubAnalysisResponse(success=True, data=analysis)


@router.delete("/analysis/{candidate_id}", response_model=MessageResponse)
def delete_analysis(
    candidate_id: str,
    ctx: AppContext = Depends(get_app_context)
):
    """Remove the stored GitHub analysis; the candidate's skills are kept."""
    validate_uuid(candidate_id)
    clear_github_analysis(ctx, candidate_id)
    return MessageResponse(success=True, message="GitHub analysis removed")

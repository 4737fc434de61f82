#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from core.github.models import GitHubAnalysis


class CandidateMatchModel(BaseModel):
    """A ranked candidate for a job."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "candidate_id": "550e8400-e29b-41d4-a716-446655440000",
                "candidate_name": "Ada Lovelace",
                "candidate_email": "ada@example.com",
                "match_score": 65,
                "reasoning": "✓ Good skill match: 2/3 required skills • ✓ L2 interview with strong performance (75%)",
                "confidence_level": "high",
                "skills": ["react", "nodejs"],
                "matching_skills": ["React", "Node.js"],
                "missing_skills": ["AWS"],
                "skill_match_score": 27,
                "interview_level": "L2",
                "interview_score": 75,
                "experience_years": 4,
                "experience_match_score": 20,
                "github_analyzed": False,
                "github_quality_score": 0,
                "quality_score": 16,
                "target_role": "Full Stack Engineer",
                "location": "Berlin",
                "last_active": "2026-02-01T12:00:00"
            }
        }
    )

    candidate_id: str
    candidate_name: str
    candidate_email: Optional[str]
    match_score: int = Field(ge=0, le=100)
    reasoning: str
    confidence_level: str

    skills: List[str] = Field(default_factory=list)
    matching_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    skill_match_score: int = 0

    interview_level: Optional[str] = None
    interview_score: Optional[int] = None
    experience_years: Optional[float] = None
    experience_match_score: int = 0

    github_analyzed: bool = False
    github_quality_score: int = 0
    quality_score: int = 0

    target_role: Optional[str] = None
    location: Optional[str] = None
    last_active: Optional[datetime] = None


class MatchingData(BaseModel):
    job_title: str
    total_matches: int
    matches: List[CandidateMatchModel]


class MatchingResponse(BaseModel):
    """Response for a fresh matching run."""
    success: bool
    data: MatchingData


class CachedCandidate(BaseModel):
    target_role: Optional[str] = None
    experience_years: Optional[float] = None
    skills: List[str] = Field(default_factory=list)
    github_username: Optional[str] = None
    github_analyzed: bool = False


class CachedMatchModel(BaseModel):
    """A cached match row with a short candidate summary."""
    candidate_id: str
    match_score: int = Field(ge=0, le=100)
    reasoning: Optional[str]
    confidence_level: Optional[str]
    created_at: Optional[datetime]
    candidate: CachedCandidate


class CachedMatchingData(BaseModel):
    job_title: str
    total_matches: int
    matches: List[CachedMatchModel]
    needs_refresh: bool = False


class CachedMatchingResponse(BaseModel):
    """Response for cached matches; ``needs_refresh`` when nothing is cached."""
    success: bool
    data: CachedMatchingData


class GitHubAnalysisResponse(BaseModel):
    success: bool
    data: GitHubAnalysis


class MessageResponse(BaseModel):
    success: bool
    message: str

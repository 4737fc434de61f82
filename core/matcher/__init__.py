"""Matcher Module - Stage 1: Candidate Retrieval."""
from core.matcher.models import (
    JobRecord, CandidateRecord, SkillResolution, CandidatePreliminary
)
from core.matcher.service import MatcherService
from core.matcher.skills import resolve_skills, SKILL_ALIASES
from core.matcher.retrieval import passes_minimum_requirements

__all__ = [
    'MatcherService', 'resolve_skills', 'passes_minimum_requirements',
    'SKILL_ALIASES', 'JobRecord', 'CandidateRecord', 'SkillResolution',
    'CandidatePreliminary'
]

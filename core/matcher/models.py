#!/usr/bin/env python3
"""
Matcher Models - Read models for matching.

Job and candidate records are plain dataclasses built from ORM rows (or
dicts) while the session is open, so matching never touches the database.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Dict, Any, Optional

from core.exceptions import InvalidInputException
from core.github.models import GitHubAnalysis

EXPERIENCE_LEVELS = ('entry', 'mid', 'senior')


def _string_list(value: Any, field_name: str, owner: str) -> List[str]:
    if not isinstance(value, list):
        raise InvalidInputException(
            f"{owner}: {field_name} must be a list, got {type(value).__name__}"
        )
    if not all(isinstance(item, str) for item in value):
        raise InvalidInputException(f"{owner}: {field_name} must only contain strings")
    return list(value)


@dataclass
class JobRecord:
    """Job posting as seen by the matcher."""
    id: str
    title: str
    required_skills: List[str]
    experience_level: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JobRecord':
        """
        Validate and build a job record.

        Raises:
            InvalidInputException: required_skills missing or not a list of
                strings, or experience_level not entry|mid|senior.
        """
        owner = f"Job {data.get('id')}"
        required_skills = data.get('required_skills')
        if required_skills is None:
            raise InvalidInputException(f"{owner}: required_skills is missing")

        level = data.get('experience_level')
        if level not in EXPERIENCE_LEVELS:
            raise InvalidInputException(f"{owner}: unknown experience_level {level!r}")

        return cls(
            id=str(data['id']),
            title=data.get('title') or "",
            required_skills=_string_list(required_skills, 'required_skills', owner),
            experience_level=level,
            description=data.get('description'),
        )

    @classmethod
    def from_orm(cls, job: Any) -> 'JobRecord':
        return cls.from_dict({
            'id': job.id,
            'title': job.title,
            'required_skills': job.required_skills,
            'experience_level': job.experience_level,
            'description': job.description,
        })


@dataclass
class CandidateRecord:
    """
    Candidate read model: profile plus aggregated interview statistics.

    Every field except ``id`` may be absent; scoring treats absence as the
    zero case rather than an error.
    """
    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    experience_years: Optional[float] = None
    highest_level: Optional[str] = None
    avg_score: Optional[float] = None
    total_interviews: int = 0
    github_data: Optional[GitHubAnalysis] = None
    target_role: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CandidateRecord':
        owner = f"Candidate {data.get('id')}"
        skills = data.get('skills')
        avg_score = data.get('avg_score')
        experience = data.get('experience_years')

        return cls(
            id=str(data['id']),
            email=data.get('email'),
            full_name=data.get('full_name'),
            skills=_string_list(skills, 'skills', owner) if skills is not None else [],
            experience_years=float(experience) if experience is not None else None,
            highest_level=data.get('highest_level'),
            avg_score=float(avg_score) if avg_score is not None else None,
            total_interviews=int(data.get('total_interviews') or 0),
            github_data=GitHubAnalysis.from_blob(data.get('github_data')),
            target_role=data.get('target_role'),
            location=data.get('location'),
            created_at=data.get('created_at'),
        )

    @classmethod
    def from_row(
        cls,
        profile: Any,
        total_interviews: int = 0,
        highest_level: Optional[str] = None,
        avg_score: Optional[float] = None,
    ) -> 'CandidateRecord':
        """Build from a CandidateProfile ORM row and its interview aggregates."""
        return cls.from_dict({
            'id': profile.id,
            'email': profile.email,
            'full_name': profile.full_name,
            'skills': profile.skills,
            'experience_years': profile.experience_years,
            'highest_level': highest_level,
            'avg_score': avg_score,
            'total_interviews': total_interviews,
            'github_data': profile.github_data,
            'target_role': profile.target_role,
            'location': profile.location,
            'created_at': profile.created_at,
        })


@dataclass
class SkillResolution:
    """
    Required skills split into three disjoint buckets.

    Names are the job's spelling, in job order; duplicates in the job's list
    are kept.
    """
    matching: List[str] = field(default_factory=list)
    partial: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.matching) + len(self.partial) + len(self.missing)


@dataclass
class CandidatePreliminary:
    """Candidate that passed Stage 1 (output of MatcherService)."""
    candidate: CandidateRecord
    resolution: SkillResolution

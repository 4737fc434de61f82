#!/usr/bin/env python3
"""
GitHub Models - Repository snapshots and the persisted analysis document.

Repository and ScoredRepository are plain dataclasses consumed by the scoring
functions. GitHubAnalysis is the JSON document stored on a candidate profile;
it is validated with pydantic on every read and write.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Dict, Any, Optional

from dateutil.parser import isoparse
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from core.exceptions import InvalidInputException
from core.utils import days_between, utc_now

# Repository categories
OSS = 'oss'
PROFESSIONAL = 'professional'
ACTIVE = 'active'
LEARNING = 'learning'
NOTABLE = 'notable'

CATEGORIES = (PROFESSIONAL, ACTIVE, OSS, LEARNING, NOTABLE)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not value:
        return utc_now()
    return isoparse(value)


@dataclass
class Repository:
    """
    Snapshot of one GitHub repository with per-user enrichment.

    ``size`` is in KB, as GitHub reports it. ``user_commits`` is the number of
    commits attributable to the candidate (0 when unknown).
    """
    name: str
    created_at: datetime
    updated_at: datetime
    size: int = 0
    description: Optional[str] = None
    stars: int = 0
    forks: int = 0
    language: Optional[str] = None
    html_url: str = ""
    is_fork: bool = False
    archived: bool = False
    is_owner: bool = True
    user_commits: int = 0
    has_readme: bool = False
    languages: Dict[str, int] = field(default_factory=dict)

    @property
    def estimated_commits(self) -> int:
        """Actual user commits when known, otherwise one commit per 50 KB (min 1)."""
        if self.user_commits > 0:
            return self.user_commits
        return max(1, self.size // 50)

    def days_active(self, now: Optional[datetime] = None) -> float:
        """Days since creation, never below 1."""
        return max(1.0, days_between(self.created_at, now))

    def age_months(self, now: Optional[datetime] = None) -> float:
        return self.days_active(now) / 30

    def days_since_update(self, now: Optional[datetime] = None) -> float:
        return days_between(self.updated_at, now)

    def lifetime_days(self) -> int:
        """Whole days between creation and the last update."""
        return max(0, int(days_between(self.created_at, self.updated_at)))

    @classmethod
    def from_api(
        cls,
        payload: Dict[str, Any],
        login: str,
        languages: Optional[Dict[str, int]] = None,
        has_readme: bool = False,
        user_commits: int = 0,
    ) -> 'Repository':
        """Build a snapshot from a GitHub REST ``repository`` object."""
        owner = (payload.get('owner') or {}).get('login')
        return cls(
            name=payload['name'],
            created_at=_parse_timestamp(payload.get('created_at')),
            updated_at=_parse_timestamp(payload.get('updated_at')),
            size=int(payload.get('size') or 0),
            description=payload.get('description'),
            stars=int(payload.get('stargazers_count') or 0),
            forks=int(payload.get('forks_count') or 0),
            language=payload.get('language'),
            html_url=payload.get('html_url') or "",
            is_fork=bool(payload.get('fork')),
            archived=bool(payload.get('archived')),
            is_owner=owner is not None and owner.lower() == login.lower(),
            user_commits=user_commits,
            has_readme=has_readme,
            languages=dict(languages or {}),
        )


@dataclass
class ScoredRepository:
    """Repository annotated with its work score and category."""
    repo: Repository
    work_score: int
    category: str

    @property
    def name(self) -> str:
        return self.repo.name


@dataclass
class ProjectDistribution:
    """Category counts plus the best repos of the showcase categories."""
    counts: Dict[str, int] = field(default_factory=dict)
    top_by_category: Dict[str, List[ScoredRepository]] = field(default_factory=dict)


class _AnalysisModel(BaseModel):
    # Older documents were written with camelCase keys.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ActivityDay(_AnalysisModel):
    date: str
    commits: int = 0


class NotableProject(_AnalysisModel):
    name: str
    description: str = ""
    quality_score: int = Field(ge=0, le=100)
    url: str = ""
    stars: int = 0
    language: Optional[str] = None
    commits: int = 0
    days_active: int = 0
    category: str = NOTABLE


class GitHubAnalysis(_AnalysisModel):
    """Persisted result of a GitHub profile analysis."""
    username: str = ""
    profile_url: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    total_repos: int = 0
    total_stars: int = 0
    total_commits: int = 0
    active_repos: int = 0
    code_volume: str = "0KB"
    recent_activity_graph: List[ActivityDay] = Field(default_factory=list)
    languages: Dict[str, int] = Field(default_factory=dict)
    skills: List[str] = Field(default_factory=list)
    proficiency_scores: Dict[str, float] = Field(default_factory=dict)
    notable_projects: List[NotableProject] = Field(default_factory=list, max_length=3)
    overall_assessment: str = ""
    recommendation: str = ""
    analysis_date: Optional[datetime] = None

    @classmethod
    def from_blob(cls, data: Optional[Dict[str, Any]]) -> Optional['GitHubAnalysis']:
        """Validate a stored JSON blob. ``None`` means the candidate has no analysis."""
        if data is None:
            return None
        if isinstance(data, GitHubAnalysis):
            return data
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidInputException(f"Malformed GitHub analysis: {e}") from e

    def to_blob(self) -> Dict[str, Any]:
        return self.model_dump(mode='json')

    def average_project_quality(self) -> Optional[float]:
        if not self.notable_projects:
            return None
        return sum(p.quality_score for p in self.notable_projects) / len(self.notable_projects)

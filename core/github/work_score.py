#!/usr/bin/env python3
"""
Repository Work Score - 0-100 estimate of the real engineering work in a repo.

Stars are deliberately weighted low: most developers have 0-2 stars, so the
score leans on commit depth, maturity, maintenance and code volume instead.

Sub-scores (each capped, raw total can exceed 100 and is clamped):
    commit depth     30
    maturity         25
    recent activity  20
    quality          15
    code volume      10
    originality      10
    community        10
    consistency      10 (only for repos at least 6 months old)
"""

import logging
from datetime import datetime
from typing import Optional

from core.github.models import Repository
from core.utils import round_half_up

logger = logging.getLogger(__name__)


def _commit_depth_score(commits: int) -> float:
    if commits >= 100:
        return 30
    if commits >= 50:
        return 25
    if commits >= 25:
        return 20
    if commits >= 10:
        return 15
    return min(commits * 1.5, 10)


def _maturity_score(age_months: float, days_since_update: float) -> float:
    # Mature and maintained beats new; old and abandoned gets the floor
    if age_months >= 12 and days_since_update < 90:
        return 25
    if age_months >= 6 and days_since_update < 180:
        return 20
    if age_months >= 3 and days_since_update < 365:
        return 15
    if age_months < 1 and days_since_update < 7:
        return 10
    return 5


def _recent_activity_score(days_since_update: float) -> float:
    if days_since_update < 7:
        return 20
    if days_since_update < 30:
        return 15
    if days_since_update < 90:
        return 10
    if days_since_update < 180:
        return 5
    return 0


def _quality_score(repo: Repository) -> float:
    score = 0
    if repo.has_readme:
        score += 8
    if repo.description and len(repo.description) > 20:
        score += 4
    if repo.size > 100:
        score += 3
    return score


def _code_volume_score(size_kb: int) -> float:
    size_mb = size_kb / 1024
    if size_mb >= 5:
        return 10
    if size_mb >= 1:
        return 7
    if size_mb >= 0.5:
        return 5
    return min(size_mb * 10, 3)


def _originality_score(repo: Repository, commits: int) -> float:
    if not repo.is_fork:
        return 10
    # An actively committed fork is an OSS contribution
    return 7 if commits >= 10 else 3


def _community_score(stars: int, forks: int) -> float:
    community = stars * 2 + forks
    if community >= 20:
        return 10
    if community >= 10:
        return 8
    if community >= 5:
        return 6
    if community >= 2:
        return 4
    if community >= 1:
        return 2
    return 0


def _consistency_score(commits: int, age_months: float) -> float:
    if age_months < 6:
        return 0
    per_month = commits / age_months
    if per_month >= 10:
        return 10
    if per_month >= 5:
        return 7
    if per_month >= 2:
        return 5
    return 3


def calculate_work_score(repo: Repository, now: Optional[datetime] = None) -> int:
    """
    Compute the work score of a repository.

    Deterministic for a fixed ``now`` (defaults to the current UTC time).

    Returns:
        Integer in [0, 100]
    """
    commits = repo.estimated_commits
    age_months = repo.age_months(now)
    days_since_update = repo.days_since_update(now)

    parts = {
        'commit_depth': _commit_depth_score(commits),
        'maturity': _maturity_score(age_months, days_since_update),
        'recent_activity': _recent_activity_score(days_since_update),
        'quality': _quality_score(repo),
        'code_volume': _code_volume_score(repo.size),
        'originality': _originality_score(repo, commits),
        'community': _community_score(repo.stars, repo.forks),
        'consistency': _consistency_score(commits, age_months),
    }
    raw = sum(parts.values())
    logger.debug(f"Work score for {repo.name}: raw={raw} parts={parts}")

    return max(0, round_half_up(min(raw, 100)))

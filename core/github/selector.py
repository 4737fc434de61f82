#!/usr/bin/env python3
"""
Top-Project Selector - picks at most three repositories to showcase.

Strategy cascade (first applicable wins):
1. Any repo with 10+ stars: top 3 by stars.
2. Any OSS contribution: OSS repos by work score, topped up with the best
   original repos.
3. Otherwise: top 3 original repos by work score.

Empty/archived repos, forks with fewer than 10 user commits and repos the
candidate does not own are never shown.
"""

import logging
from datetime import datetime
from typing import List, Optional

from core.github.categorizer import categorize_repository
from core.github.models import (
    Repository, ScoredRepository, ProjectDistribution,
    CATEGORIES, OSS, PROFESSIONAL, ACTIVE, LEARNING,
)
from core.github.work_score import calculate_work_score

logger = logging.getLogger(__name__)

MAX_TOP_PROJECTS = 3
MIN_FORK_COMMITS = 10
HIGH_STAR_THRESHOLD = 10
SHOWCASE_PER_CATEGORY = 2


def score_repositories(
    repos: List[Repository],
    now: Optional[datetime] = None,
) -> List[ScoredRepository]:
    """Score and categorize all non-empty, non-archived repos, preserving order."""
    scored = []
    for repo in repos:
        if repo.size <= 0 or repo.archived:
            continue
        work_score = calculate_work_score(repo, now)
        scored.append(ScoredRepository(
            repo=repo,
            work_score=work_score,
            category=categorize_repository(repo, work_score, now),
        ))
    return scored


def _is_meaningful(item: ScoredRepository) -> bool:
    repo = item.repo
    if repo.is_fork:
        if repo.user_commits < MIN_FORK_COMMITS:
            logger.debug(f"Filtered fork: {repo.name} ({repo.user_commits} commits)")
            return False
        return True
    if not repo.is_owner:
        logger.debug(f"Filtered non-owned repo: {repo.name}")
        return False
    return True


def _by_work_score(items: List[ScoredRepository]) -> List[ScoredRepository]:
    return sorted(items, key=lambda s: s.work_score, reverse=True)


def select_top_projects(
    repos: List[Repository],
    total_stars: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[ScoredRepository]:
    """
    Select up to three showcase repositories.

    Args:
        repos: Candidate's repositories
        total_stars: Star total over original repos (informational only)
        now: Reference time for age-based scoring

    Returns:
        At most three ScoredRepository entries. Sorting is stable, so ties keep
        input order.
    """
    if not repos:
        return []

    meaningful = [s for s in score_repositories(repos, now) if _is_meaningful(s)]
    logger.debug(
        f"Selecting top projects from {len(meaningful)}/{len(repos)} repos "
        f"(total stars: {total_stars})"
    )

    starred = [s for s in meaningful if s.repo.stars >= HIGH_STAR_THRESHOLD]
    if starred:
        return sorted(starred, key=lambda s: s.repo.stars, reverse=True)[:MAX_TOP_PROJECTS]

    oss = _by_work_score([s for s in meaningful if s.category == OSS])
    if oss:
        if len(oss) >= MAX_TOP_PROJECTS:
            return oss[:MAX_TOP_PROJECTS]
        originals = _by_work_score(
            [s for s in meaningful if s.category != OSS and not s.repo.is_fork]
        )
        return (oss + originals)[:MAX_TOP_PROJECTS]

    originals = [s for s in meaningful if not s.repo.is_fork]
    return _by_work_score(originals)[:MAX_TOP_PROJECTS]


def analyze_project_distribution(
    repos: List[Repository],
    now: Optional[datetime] = None,
) -> ProjectDistribution:
    """Count repos per category and keep the top two of each showcase category."""
    scored = score_repositories(repos, now)

    counts = {category: 0 for category in CATEGORIES}
    for item in scored:
        counts[item.category] += 1

    top_by_category = {
        category: _by_work_score([s for s in scored if s.category == category])[:SHOWCASE_PER_CATEGORY]
        for category in (PROFESSIONAL, ACTIVE, OSS)
    }
    # Learning projects are never showcased
    top_by_category[LEARNING] = []

    return ProjectDistribution(counts=counts, top_by_category=top_by_category)

"""Repository categorizer. First matching rule wins; every repo gets a category."""

from datetime import datetime
from typing import Optional

from core.github.models import (
    Repository, OSS, PROFESSIONAL, ACTIVE, LEARNING, NOTABLE,
)


def categorize_repository(
    repo: Repository,
    work_score: int,
    now: Optional[datetime] = None,
) -> str:
    # OSS needs actual commits by the user, estimates do not count
    if repo.is_fork and repo.user_commits >= 10:
        return OSS

    age_months = repo.age_months(now)

    if work_score >= 70 and age_months >= 6 and repo.has_readme:
        return PROFESSIONAL

    if repo.days_since_update(now) < 30 and work_score >= 50:
        return ACTIVE

    if age_months < 3 or repo.estimated_commits < 10 or repo.size < 100:
        return LEARNING

    return NOTABLE

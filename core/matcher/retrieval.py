"""Stage 1 retrieval filter: a cheap pass/fail gate run before ranking."""

import logging
from typing import Optional

from core.config_loader import MatcherConfig
from core.matcher.models import CandidateRecord, JobRecord, SkillResolution
from core.matcher.skills import resolve_skills

logger = logging.getLogger(__name__)


def skill_overlap_ratio(resolution: SkillResolution, required_count: int) -> float:
    return len(resolution.matching) / max(required_count, 1)


def passes_minimum_requirements(
    candidate: CandidateRecord,
    job: JobRecord,
    config: Optional[MatcherConfig] = None,
    resolution: Optional[SkillResolution] = None,
) -> bool:
    """
    Reject candidates with too little skill overlap or far-off experience.

    Experience slack is asymmetric (1 year below, 3 above by default) so that
    slightly over-qualified candidates still reach ranking. Missing experience
    counts as 0 years.
    """
    config = config or MatcherConfig()
    if resolution is None:
        resolution = resolve_skills(candidate.skills, job.required_skills)

    ratio = skill_overlap_ratio(resolution, len(job.required_skills))
    if ratio < config.min_skill_overlap:
        logger.debug(f"Candidate {candidate.id} rejected: skill overlap {ratio:.2f}")
        return False

    low, high = config.experience_ranges[job.experience_level]
    years = candidate.experience_years or 0
    if years < low - config.experience_slack_below or years > high + config.experience_slack_above:
        logger.debug(
            f"Candidate {candidate.id} rejected: {years} years outside "
            f"{job.experience_level} range [{low}, {high}]"
        )
        return False

    return True

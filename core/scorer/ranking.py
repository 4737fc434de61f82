#!/usr/bin/env python3
"""
Ranking components for Stage 2.

Each component is a pure function returning ``(points, reason)``. Points are
rounded half-up and capped by the ScorerConfig weights; absent candidate data
always yields the component's zero case, never an error.
"""

import math
from datetime import datetime
from typing import List, Optional, Tuple

from core.config_loader import ScorerConfig
from core.github.models import GitHubAnalysis
from core.matcher.models import CandidateRecord, JobRecord, SkillResolution
from core.utils import days_between, round_half_up

Component = Tuple[int, str]

REASON_SEPARATOR = " • "


def _format_years(years: float) -> str:
    return f"{years:g}"


def skill_match_score(
    resolution: SkillResolution,
    required_count: int,
    config: ScorerConfig,
) -> Component:
    total = max(required_count, 1)
    exact = len(resolution.matching)
    weighted = (exact + config.partial_match_credit * len(resolution.partial)) / total
    points = round_half_up(weighted * config.skill_weight)

    ratio = exact / total
    if ratio >= config.excellent_skill_ratio:
        reason = f"✓ Excellent skill match: {exact}/{total} required skills"
    elif ratio >= config.good_skill_ratio:
        reason = f"✓ Good skill match: {exact}/{total} required skills"
    else:
        reason = f"⚠ Partial skill match: {exact}/{total} required skills"
    return points, reason


def interview_quality_score(candidate: CandidateRecord, config: ScorerConfig) -> Component:
    # An average of 0 counts as no assessment
    if not candidate.highest_level or not candidate.avg_score:
        return 0, "⚠ No interview assessment completed yet"

    weight = config.level_weights.get(candidate.highest_level, config.default_level_weight)
    points = round_half_up(candidate.avg_score / 100 * config.interview_weight * weight)
    points = min(points, round_half_up(config.interview_weight))

    avg = candidate.avg_score
    performance = 'excellent' if avg >= 80 else 'strong' if avg >= 65 else 'good'
    reason = (
        f"✓ {candidate.highest_level} interview with {performance} performance "
        f"({round_half_up(avg)}%)"
    )
    return points, reason


def experience_match_score(
    candidate: CandidateRecord,
    job: JobRecord,
    config: ScorerConfig,
) -> Component:
    band = config.experience_bands[job.experience_level]
    years = candidate.experience_years or 0
    shown = _format_years(years)

    if band.min <= years <= band.max:
        decayed = config.experience_weight * (1 - abs(years - band.ideal) / config.experience_decay_years)
        points = max(config.experience_in_range_floor, decayed)
        reason = f"✓ Experience level matches perfectly ({shown} years)"
    elif years > band.max:
        points = config.experience_overqualified_score
        reason = f"✓ Highly experienced ({shown} years, may be overqualified)"
    else:
        shortfall = band.min - years
        points = max(0, config.experience_underqualified_base
                     - shortfall * config.experience_underqualified_penalty_per_year)
        reason = f"⚠ Less experience than typical ({shown} years for {job.experience_level} role)"

    return round_half_up(points), reason


def _verified_skill_count(github: GitHubAnalysis, matching: List[str]) -> int:
    matching_lower = {skill.lower() for skill in matching}
    return sum(1 for skill in github.skills if skill.lower() in matching_lower)


def github_quality_score(
    github: Optional[GitHubAnalysis],
    resolution: SkillResolution,
    config: ScorerConfig,
) -> Component:
    if github is None:
        return 0, "○ No GitHub portfolio verified"

    points = config.github_base_score

    avg_quality = github.average_project_quality()
    if avg_quality is not None:
        if avg_quality >= config.github_high_quality_threshold:
            points += 3
        elif avg_quality >= config.github_mid_quality_threshold:
            points += 2
        else:
            points += 1

    verified = _verified_skill_count(github, resolution.matching)
    if verified >= 3:
        points += 2
    elif verified >= 1:
        points += 1

    points = min(config.github_max, points)
    reason = f"✓ GitHub verified: {github.total_repos} repos, {github.total_stars} stars"
    return round_half_up(points), reason


def recency_bonus(
    candidate: CandidateRecord,
    config: ScorerConfig,
    now: Optional[datetime] = None,
) -> Component:
    points = 0.0
    reasons = []

    if candidate.total_interviews > 0:
        points += config.interview_activity_bonus
        reasons.append(f"✓ Active on platform ({candidate.total_interviews} interviews)")

    github = candidate.github_data
    if github is not None and github.analysis_date is not None:
        age_days = math.floor(days_between(github.analysis_date, now))
        # Fresh and recent are exclusive tiers
        if age_days < config.github_fresh_days:
            points += config.github_fresh_bonus
        elif age_days < config.github_recent_days:
            points += config.github_recent_bonus

    return round_half_up(min(config.recency_max, points)), REASON_SEPARATOR.join(reasons)


def confidence_level(candidate: CandidateRecord, config: ScorerConfig) -> str:
    """How much supporting data backs the score: high, medium or low."""
    signals = sum([
        len(candidate.skills) > 0,
        candidate.highest_level is not None,
        candidate.github_data is not None,
        candidate.experience_years is not None,
        candidate.total_interviews > 0,
    ])
    if signals >= config.confidence_high_min_signals:
        return 'high'
    if signals >= config.confidence_medium_min_signals:
        return 'medium'
    return 'low'

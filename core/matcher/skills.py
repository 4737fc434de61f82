#!/usr/bin/env python3
"""
Skill Similarity Resolver.

Classifies each required skill of a job against a candidate's skill list:

- exact (case/whitespace-insensitive) or known alias -> matching
- substring in either direction ("react" vs "react native") -> partial
- otherwise -> missing
"""

import logging
from typing import Dict, Iterable, List, Set

from core.matcher.models import SkillResolution

logger = logging.getLogger(__name__)

SKILL_ALIASES: Dict[str, List[str]] = {
    'javascript': ['js', 'ecmascript', 'es6', 'es2015'],
    'typescript': ['ts'],
    'react': ['reactjs', 'react.js'],
    'vue': ['vuejs', 'vue.js'],
    'angular': ['angularjs'],
    'node': ['nodejs', 'node.js'],
    'python': ['py'],
    'postgresql': ['postgres', 'psql'],
    'mongodb': ['mongo'],
    'kubernetes': ['k8s'],
    'docker': ['containers'],
    'aws': ['amazon web services'],
    'gcp': ['google cloud'],
    'azure': ['microsoft azure'],
}


def normalize_skill(skill: str) -> str:
    return skill.strip().lower()


def _build_alias_groups(aliases: Dict[str, List[str]]) -> Dict[str, Set[str]]:
    """Map every spelling to the full set of spellings of the same skill."""
    groups: Dict[str, Set[str]] = {}
    for canonical, variants in aliases.items():
        group = {canonical, *variants}
        for name in group:
            groups.setdefault(name, set()).update(group)
    return groups


_ALIAS_GROUPS = _build_alias_groups(SKILL_ALIASES)


def are_aliases(a: str, b: str) -> bool:
    """True when two normalized skills name the same technology."""
    return b in _ALIAS_GROUPS.get(a, ())


def resolve_skills(candidate_skills: Iterable[str], required_skills: List[str]) -> SkillResolution:
    """
    Resolve a job's required skills against a candidate's skills.

    Every required skill lands in exactly one bucket. Blank candidate skills
    are ignored so they never substring-match everything.

    Args:
        candidate_skills: Free-text skills of the candidate
        required_skills: Skills the job requires, in job order

    Returns:
        SkillResolution with names copied verbatim from required_skills
    """
    candidate = [normalize_skill(s) for s in candidate_skills or [] if s and s.strip()]
    candidate_set = set(candidate)

    resolution = SkillResolution()
    for required in required_skills:
        needle = normalize_skill(required)

        if needle in candidate_set or any(are_aliases(needle, c) for c in candidate):
            resolution.matching.append(required)
        elif needle and any(needle in c or c in needle for c in candidate):
            resolution.partial.append(required)
        else:
            resolution.missing.append(required)

    logger.debug(
        f"Skill resolution: {len(resolution.matching)} matching, "
        f"{len(resolution.partial)} partial, {len(resolution.missing)} missing"
    )
    return resolution

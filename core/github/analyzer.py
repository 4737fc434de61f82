#!/usr/bin/env python3
"""
GitHub Analyzer Service - turns a candidate's repositories into a GitHubAnalysis.

Numbers (totals, work scores, selected projects) are computed here; the prose
(skills, proficiency, project blurbs, assessment, recommendation) comes from the
LLM provider. When the provider is unavailable or answers with garbage a
deterministic fallback fills the prose in, so an analysis is always produced.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

from openai import OpenAIError

from core.config_loader import GitHubConfig
from core.exceptions import (
    CandidateNotFoundException,
    LLMResponseError,
    UpstreamServiceException,
)
from core.github.client import GitHubClient
from core.github.models import (
    ActivityDay, GitHubAnalysis, NotableProject, ProjectDistribution,
    Repository, ScoredRepository, NOTABLE,
)
from core.github.selector import analyze_project_distribution, select_top_projects
from core.llm.interfaces import LLMProvider
from core.llm.system_prompts import GITHUB_ANALYSIS_SYSTEM_PROMPT
from core.utils import clamp, format_code_volume, round_half_up, utc_now

logger = logging.getLogger(__name__)

ACTIVE_REPO_DAYS = 90
TOP_LANGUAGES = 10


def _top_languages(repos: List[Repository]) -> List[Tuple[str, int]]:
    totals: Dict[str, int] = {}
    for repo in repos:
        for language, size in repo.languages.items():
            totals[language] = totals.get(language, 0) + int(size)
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)[:TOP_LANGUAGES]


def _fallback_quality(work_score: int) -> int:
    return int(clamp(work_score + 20, 50, 100))


def _coerce_quality(value: Any) -> Optional[int]:
    try:
        return int(clamp(round_half_up(float(value)), 0, 100))
    except (TypeError, ValueError):
        return None


def _build_prompt(
    user: Dict[str, Any],
    repos: List[Repository],
    code_volume: str,
    estimated_commits: int,
    languages: List[Tuple[str, int]],
    top_projects: List[ScoredRepository],
    distribution: ProjectDistribution,
    now: datetime,
) -> str:
    lines = [
        "Analyze this software developer's GitHub profile based on REAL WORK & COMMITMENT.",
        "",
        "Profile Overview:",
        f"- Username: {user.get('login')}",
        f"- Total Repositories: {len(repos)}",
        f"- Code Volume: {code_volume}",
        f"- Estimated Total Commits: {estimated_commits}+",
        f"- Bio: {user.get('bio') or 'Not provided'}",
        "",
        "Project Distribution:",
    ]
    for category, count in distribution.counts.items():
        lines.append(f"- {category}: {count}")

    lines += ["", "Primary Languages (by code volume):"]
    lines += [f"- {language}: {round_half_up(size / 1024)}KB" for language, size in languages]

    lines += ["", "Top Projects:"]
    for idx, item in enumerate(top_projects, start=1):
        repo = item.repo
        lines += [
            f"{idx}. {repo.name} [Work Score: {item.work_score}/100, Category: {item.category}]",
            f"   - Description: {repo.description or 'No description'}",
            f"   - Tech: {repo.language or 'Multiple languages'}",
            f"   - Activity: {repo.estimated_commits}+ commits over {repo.lifetime_days()} days",
            f"   - Last Update: {int(repo.days_since_update(now))} days ago",
            f"   - Stars: {repo.stars} | Forks: {repo.forks}",
            f"   - Has README: {'Yes' if repo.has_readme else 'No'}",
            f"   - Type: {'Fork (OSS contribution)' if repo.is_fork else 'Original work'}",
        ]
    return "\n".join(lines)


class GitHubAnalyzerService:
    """
    Builds and stores GitHub analyses for candidates.

    The repository is passed per operation; GitHub clients are created per
    access token through ``client_factory``.
    """

    def __init__(
        self,
        llm: Optional[LLMProvider],
        config: Optional[GitHubConfig] = None,
        client_factory: Optional[Callable[[str], GitHubClient]] = None,
    ):
        self.llm = llm
        self.config = config or GitHubConfig()
        self.client_factory = client_factory or self._default_client

    def _default_client(self, access_token: str) -> GitHubClient:
        return GitHubClient(
            access_token,
            api_url=self.config.api_url,
            per_page=self.config.per_page,
            max_commit_pages=self.config.max_commit_pages,
            request_timeout_seconds=self.config.request_timeout_seconds,
        )

    def _generate_insights(self, prompt: str) -> Optional[Dict[str, Any]]:
        if self.llm is None:
            return None
        try:
            return self.llm.generate_json(GITHUB_ANALYSIS_SYSTEM_PROMPT, prompt)
        except (LLMResponseError, OpenAIError) as e:
            logger.warning(f"LLM analysis failed, using fallback: {e}")
            return None

    def _notable_projects(
        self,
        top_projects: List[ScoredRepository],
        insights: Optional[Dict[str, Any]],
    ) -> List[NotableProject]:
        described: Dict[str, Dict[str, Any]] = {}
        for entry in (insights or {}).get('notable_projects') or []:
            if isinstance(entry, dict) and entry.get('name'):
                described.setdefault(entry['name'], entry)

        projects = []
        for item in top_projects:
            repo = item.repo
            entry = described.get(repo.name, {})
            quality = _coerce_quality(entry.get('quality_score'))
            projects.append(NotableProject(
                name=repo.name,
                description=entry.get('description') or repo.description or 'Notable project',
                quality_score=quality if quality is not None else _fallback_quality(item.work_score),
                url=repo.html_url,
                stars=repo.stars,
                language=repo.language,
                commits=repo.user_commits,
                days_active=repo.lifetime_days(),
                category=entry.get('category') or item.category or NOTABLE,
            ))
        return projects

    def build_analysis(
        self,
        user: Dict[str, Any],
        repos: List[Repository],
        activity: Optional[List[ActivityDay]] = None,
        now: Optional[datetime] = None,
    ) -> GitHubAnalysis:
        """
        Assemble a GitHubAnalysis from fetched data.

        Totals cover original repos only (not forks, owned by the user).
        """
        now = now or utc_now()
        login = user.get('login') or ""

        originals = [r for r in repos if not r.is_fork and r.is_owner]
        total_stars = sum(r.stars for r in originals)
        code_volume = format_code_volume(sum(r.size for r in originals))
        user_commits = sum(r.user_commits for r in originals)
        active_repos = sum(1 for r in originals if r.days_since_update(now) < ACTIVE_REPO_DAYS)
        languages = _top_languages(repos)

        top_projects = select_top_projects(repos, total_stars, now)
        distribution = analyze_project_distribution(repos, now)
        estimated_commits = sum(item.repo.estimated_commits for item in top_projects)

        logger.info(
            f"GitHub analysis for {login}: {len(repos)} repos, {len(originals)} original, "
            f"{user_commits} user commits, code volume {code_volume}"
        )
        for idx, item in enumerate(top_projects, start=1):
            logger.info(
                f"  Top project {idx}: {item.name} "
                f"({'FORK' if item.repo.is_fork else 'ORIGINAL'}) - {item.repo.user_commits} commits"
            )

        prompt = _build_prompt(
            user, repos, code_volume, estimated_commits, languages,
            top_projects, distribution, now,
        )
        insights = self._generate_insights(prompt)

        if insights is not None:
            skills = [s for s in insights.get('skills') or [] if isinstance(s, str)]
            proficiency = {
                k: v for k, v in (insights.get('proficiency_scores') or {}).items()
                if isinstance(v, (int, float))
            }
            assessment = insights.get('overall_assessment') or ""
            recommendation = insights.get('recommendation') or ""
        else:
            skills = [language for language, _ in languages]
            proficiency = {
                language: max(5, 10 - idx) for idx, (language, _) in enumerate(languages)
            }
            primary = languages[0][0] if languages else 'various languages'
            assessment = (
                f"Developer with {len(originals)} original repositories and {code_volume} "
                f"of code, primarily using {primary}."
            )
            recommendation = (
                "Focus on consistent project updates and consider contributing to open source."
            )

        return GitHubAnalysis(
            username=login,
            profile_url=user.get('html_url'),
            avatar_url=user.get('avatar_url'),
            bio=user.get('bio'),
            total_repos=len(originals),
            total_stars=total_stars,
            total_commits=user_commits or estimated_commits,
            active_repos=active_repos,
            code_volume=code_volume,
            recent_activity_graph=list(activity or []),
            languages=dict(languages),
            skills=skills,
            proficiency_scores=proficiency,
            notable_projects=self._notable_projects(top_projects, insights),
            overall_assessment=assessment,
            recommendation=recommendation,
            analysis_date=now,
        )

    def analyze_repositories(
        self,
        repo: Any,
        candidate_id: Any,
        access_token: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> GitHubAnalysis:
        """
        Fetch, analyze and store a candidate's GitHub profile.

        The analysis skills replace the candidate's skills list.

        Raises:
            CandidateNotFoundException: Unknown candidate.
            UpstreamServiceException: No token, or GitHub could not be reached.
        """
        candidate = repo.candidates.get_by_id(candidate_id)
        if candidate is None:
            raise CandidateNotFoundException(f"Candidate {candidate_id} not found")

        token = access_token or self.config.token
        if not token:
            raise UpstreamServiceException("No GitHub access token available")

        with self.client_factory(token) as client:
            user, repos = client.fetch_profile()
            activity = client.get_activity_graph(user['login'], self.config.activity_days, now)

        analysis = self.build_analysis(user, repos, activity, now)
        repo.candidates.save_github_analysis(
            candidate, analysis.username, analysis.to_blob(), analysis.skills
        )
        return analysis

    def get_analysis(self, repo: Any, candidate_id: Any) -> Optional[GitHubAnalysis]:
        candidate = repo.candidates.get_by_id(candidate_id)
        if candidate is None:
            raise CandidateNotFoundException(f"Candidate {candidate_id} not found")
        return GitHubAnalysis.from_blob(candidate.github_data)

    def clear_analysis(self, repo: Any, candidate_id: Any) -> None:
        candidate = repo.candidates.get_by_id(candidate_id)
        if candidate is None:
            raise CandidateNotFoundException(f"Candidate {candidate_id} not found")
        repo.candidates.clear_github_analysis(candidate)

#!/usr/bin/env python3
"""
End-to-end tests of the matching pipeline on a throwaway database.
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from core.app_context import AppContext
from core.config_loader import AppConfig, LlmConfig
from core.exceptions import CandidateNotFoundException, JobNotFoundException
from core.github.analyzer import GitHubAnalyzerService
from pipeline.runner import (
    clear_github_analysis,
    get_github_analysis,
    load_cached_matches,
    run_github_analysis,
    run_matching_pipeline,
)
from tests.unit.core.github.helpers import make_repo

pytestmark = pytest.mark.db

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)


@pytest.fixture
def ctx():
    return AppContext.build(AppConfig(llm=LlmConfig(enabled=False)))


@pytest.fixture
def seeded(hiring_repo, db_session):
    job = hiring_repo.jobs.create('Full Stack Engineer', ['React', 'Node.js', 'AWS'], 'mid')
    ada = hiring_repo.candidates.create(
        email='ada@example.com', full_name='Ada', skills=['react', 'nodejs'], experience_years=4,
    )
    for score in (70, 80):
        hiring_repo.candidates.add_interview(ada.id, 'L2', score)
    bob = hiring_repo.candidates.create(email='bob@example.com', skills=['react'], experience_years=3)
    hiring_repo.candidates.create(email='cy@example.com', skills=['cobol'], experience_years=4)

    ids = {'job': str(job.id), 'ada': str(ada.id), 'bob': str(bob.id)}
    db_session.commit()
    return ids


class TestMatchingPipeline:

    def test_run_ranks_and_caches(self, ctx, seeded):
        result = run_matching_pipeline(ctx, seeded['job'], now=NOW)

        assert result.job_title == 'Full Stack Engineer'
        assert [m.candidate_id for m in result.matches] == [seeded['ada'], seeded['bob']]
        assert result.matches[0].match_score == 65
        assert result.saved_count == 2

        cached = load_cached_matches(ctx, seeded['job'])
        assert cached['job_title'] == 'Full Stack Engineer'
        assert [m['candidate_id'] for m in cached['matches']] == [seeded['ada'], seeded['bob']]
        assert cached['matches'][0]['match_score'] == 65
        assert cached['matches'][0]['confidence_level'] == 'high'
        assert cached['matches'][0]['candidate']['skills'] == ['react', 'nodejs']
        assert cached['matches'][0]['candidate']['github_analyzed'] is False

    def test_rerun_is_idempotent(self, ctx, seeded):
        first = run_matching_pipeline(ctx, seeded['job'], now=NOW)
        second = run_matching_pipeline(ctx, seeded['job'], now=NOW)

        assert [m.to_dict() for m in first.matches] == [m.to_dict() for m in second.matches]
        assert len(load_cached_matches(ctx, seeded['job'])['matches']) == 2

    def test_limit_and_no_cache(self, ctx, seeded):
        result = run_matching_pipeline(ctx, seeded['job'], limit=1, use_cache=False, now=NOW)

        assert len(result.matches) == 1
        assert result.saved_count == 0
        assert load_cached_matches(ctx, seeded['job'])['matches'] == []

    def test_unknown_job(self, ctx, seeded):
        with pytest.raises(JobNotFoundException):
            run_matching_pipeline(ctx, str(uuid.uuid4()))


class TestGitHubPipeline:

    def _analyzer(self):
        client = MagicMock()
        client.__enter__.return_value = client
        client.fetch_profile.return_value = (
            {'login': 'octo', 'html_url': 'https://github.com/octo'},
            [make_repo('api', user_commits=60, has_readme=True, languages={'TypeScript': 9000})],
        )
        client.get_activity_graph.return_value = []
        return GitHubAnalyzerService(llm=None, client_factory=MagicMock(return_value=client))

    def test_analyze_get_and_clear(self, ctx, seeded):
        ctx.github_analyzer = self._analyzer()

        analysis = run_github_analysis(ctx, seeded['bob'], access_token='tok')
        assert analysis.skills == ['TypeScript']

        stored = get_github_analysis(ctx, seeded['bob'])
        assert stored.username == 'octo'
        assert stored.notable_projects[0].name == 'api'

        clear_github_analysis(ctx, seeded['bob'])
        assert get_github_analysis(ctx, seeded['bob']) is None

    def test_analysis_feeds_matching(self, ctx, seeded):
        ctx.github_analyzer = self._analyzer()
        run_github_analysis(ctx, seeded['bob'], access_token='tok')

        # skills replaced by ['TypeScript'], so bob no longer passes retrieval
        result = run_matching_pipeline(ctx, seeded['job'], now=NOW)
        assert [m.candidate_id for m in result.matches] == [seeded['ada']]

    def test_unknown_candidate(self, ctx, seeded):
        with pytest.raises(CandidateNotFoundException):
            get_github_analysis(ctx, str(uuid.uuid4()))

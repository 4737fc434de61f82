#!/usr/bin/env python3
"""
Test suite for the Stage 2 ranking components.
"""

import unittest
from datetime import datetime, timedelta, timezone

from core.config_loader import ScorerConfig
from core.github.models import GitHubAnalysis, NotableProject
from core.matcher.models import CandidateRecord, JobRecord, SkillResolution
from core.scorer import ranking

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _github(qualities=(80, 60), skills=(), age_days=10):
    return GitHubAnalysis(
        username='octo',
        total_repos=7,
        total_stars=15,
        skills=list(skills),
        notable_projects=[
            NotableProject(name=f"p{i}", quality_score=q) for i, q in enumerate(qualities)
        ],
        analysis_date=NOW - timedelta(days=age_days),
    )


class TestSkillMatchScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_two_of_three(self):
        resolution = SkillResolution(matching=['React', 'Node.js'], missing=['AWS'])
        points, reason = ranking.skill_match_score(resolution, 3, self.config)

        self.assertEqual(points, 27)
        self.assertEqual(reason, "✓ Good skill match: 2/3 required skills")

    def test_partial_matches_earn_half_credit(self):
        resolution = SkillResolution(matching=['A'], partial=['B'], missing=['C', 'D'])
        points, reason = ranking.skill_match_score(resolution, 4, self.config)

        self.assertEqual(points, 15)  # (1 + 0.5) / 4 * 40
        self.assertTrue(reason.startswith("⚠ Partial skill match"))

    def test_all_matching_is_excellent(self):
        resolution = SkillResolution(matching=['A', 'B'])
        points, reason = ranking.skill_match_score(resolution, 2, self.config)

        self.assertEqual(points, 40)
        self.assertIn("Excellent", reason)

    def test_empty_requirements(self):
        points, _ = ranking.skill_match_score(SkillResolution(), 0, self.config)
        self.assertEqual(points, 0)


class TestInterviewQualityScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_l2_strong(self):
        candidate = CandidateRecord(id='c', highest_level='L2', avg_score=75)
        points, reason = ranking.interview_quality_score(candidate, self.config)

        self.assertEqual(points, 16)  # 0.75 * 25 * 0.85 = 15.94
        self.assertEqual(reason, "✓ L2 interview with strong performance (75%)")

    def test_l3_perfect_hits_cap(self):
        candidate = CandidateRecord(id='c', highest_level='L3', avg_score=100)
        points, reason = ranking.interview_quality_score(candidate, self.config)

        self.assertEqual(points, 25)
        self.assertIn("excellent", reason)

    def test_unknown_level_uses_default_weight(self):
        candidate = CandidateRecord(id='c', highest_level='L9', avg_score=50)
        points, reason = ranking.interview_quality_score(candidate, self.config)

        self.assertEqual(points, 8)  # 0.5 * 25 * 0.6 = 7.5 rounds up
        self.assertIn("good performance", reason)

    def test_level_without_score_gets_nothing(self):
        candidate = CandidateRecord(id='c', highest_level='L1', avg_score=None)
        points, reason = ranking.interview_quality_score(candidate, self.config)

        self.assertEqual(points, 0)
        self.assertEqual(reason, "⚠ No interview assessment completed yet")

    def test_zero_average_counts_as_no_assessment(self):
        candidate = CandidateRecord(id='c', highest_level='L1', avg_score=0.0)
        points, reason = ranking.interview_quality_score(candidate, self.config)

        self.assertEqual(points, 0)
        self.assertEqual(reason, "⚠ No interview assessment completed yet")


class TestExperienceMatchScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()
        self.job = JobRecord(id='j', title='t', required_skills=['x'], experience_level='mid')

    def _score(self, years):
        return ranking.experience_match_score(
            CandidateRecord(id='c', experience_years=years), self.job, self.config
        )

    def test_ideal_years(self):
        points, reason = self._score(4)
        self.assertEqual(points, 20)
        self.assertEqual(reason, "✓ Experience level matches perfectly (4 years)")

    def test_in_range_decay_has_floor(self):
        self.assertEqual(self._score(7)[0], 15)  # 20 * (1 - 3/10) = 14, raised to the floor
        self.assertEqual(self._score(2)[0], 16)

    def test_overqualified(self):
        points, reason = self._score(9.5)
        self.assertEqual(points, 12)
        self.assertIn("may be overqualified", reason)
        self.assertIn("9.5 years", reason)

    def test_underqualified_penalty(self):
        points, reason = self._score(1)
        self.assertEqual(points, 6)  # 8 - 1 * 2
        self.assertEqual(reason, "⚠ Less experience than typical (1 years for mid role)")

    def test_missing_years_treated_as_zero(self):
        self.assertEqual(self._score(None)[0], 4)


class TestGitHubQualityScore(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_no_github(self):
        points, reason = ranking.github_quality_score(None, SkillResolution(), self.config)
        self.assertEqual(points, 0)
        self.assertEqual(reason, "○ No GitHub portfolio verified")

    def test_high_quality_and_verified_skills_are_capped(self):
        github = _github(qualities=(90, 80), skills=['Python', 'Go', 'sql'])
        resolution = SkillResolution(matching=['python', 'GO', 'SQL'])
        points, reason = ranking.github_quality_score(github, resolution, self.config)

        self.assertEqual(points, 10)
        self.assertEqual(reason, "✓ GitHub verified: 7 repos, 15 stars")

    def test_mid_quality_one_verified(self):
        github = _github(qualities=(60, 50), skills=['Python'])
        resolution = SkillResolution(matching=['Python'])
        points, _ = ranking.github_quality_score(github, resolution, self.config)
        self.assertEqual(points, 8)  # 5 + 2 + 1

    def test_no_projects_no_quality_bonus(self):
        github = _github(qualities=())
        points, _ = ranking.github_quality_score(github, SkillResolution(), self.config)
        self.assertEqual(points, 5)


class TestRecencyBonus(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_interviews_and_fresh_github_are_capped(self):
        candidate = CandidateRecord(id='c', total_interviews=3, github_data=_github(age_days=5))
        points, reason = ranking.recency_bonus(candidate, self.config, NOW)

        self.assertEqual(points, 5)
        self.assertEqual(reason, "✓ Active on platform (3 interviews)")

    def test_recent_github_only(self):
        candidate = CandidateRecord(id='c', github_data=_github(age_days=45))
        points, reason = ranking.recency_bonus(candidate, self.config, NOW)

        self.assertEqual(points, 1)
        self.assertEqual(reason, "")

    def test_stale_github(self):
        candidate = CandidateRecord(id='c', github_data=_github(age_days=200))
        self.assertEqual(ranking.recency_bonus(candidate, self.config, NOW)[0], 0)

    def test_fresh_boundary_is_exclusive(self):
        candidate = CandidateRecord(id='c', github_data=_github(age_days=30))
        self.assertEqual(ranking.recency_bonus(candidate, self.config, NOW)[0], 1)


class TestConfidenceLevel(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_levels(self):
        low = CandidateRecord(id='c', skills=['x'])
        medium = CandidateRecord(id='c', skills=['x'], experience_years=3)
        high = CandidateRecord(
            id='c', skills=['x'], experience_years=3, highest_level='L1', total_interviews=1
        )

        self.assertEqual(ranking.confidence_level(low, self.config), 'low')
        self.assertEqual(ranking.confidence_level(medium, self.config), 'medium')
        self.assertEqual(ranking.confidence_level(high, self.config), 'high')
        self.assertEqual(ranking.confidence_level(CandidateRecord(id='c'), self.config), 'low')


if __name__ == '__main__':
    unittest.main()

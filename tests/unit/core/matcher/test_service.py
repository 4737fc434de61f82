#!/usr/bin/env python3
"""
Unit tests for MatcherService with a mocked repository.
"""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

from core.config_loader import MatcherConfig
from core.exceptions import InvalidInputException, JobNotFoundException
from core.matcher import MatcherService


def _profile(id, skills, years, **extra):
    data = dict(
        id=id, email=f"{id}@example.com", full_name=None, skills=skills,
        experience_years=years, github_data=None, target_role=None,
        location=None, created_at=None,
    )
    data.update(extra)
    return SimpleNamespace(**data)


class TestMatcherService(unittest.TestCase):
    """Unit tests for MatcherService - no database required."""

    def setUp(self):
        self.repo = MagicMock()
        self.repo.jobs.get_by_id.return_value = SimpleNamespace(
            id='job-1', title='Frontend Engineer', required_skills=['React', 'TypeScript'],
            experience_level='mid', description=None,
        )
        self.service = MatcherService(MatcherConfig())

    def test_01_retrieve_filters_and_keeps_order(self):
        print("\n🔎 UNIT Test 1: Stage 1 retrieval")
        self.repo.candidates.list_with_interview_stats.return_value = [
            (_profile('a', ['react'], 3), 0, None, None),
            (_profile('b', ['cobol'], 3), 0, None, None),
            (_profile('c', ['ts', 'reactjs'], 5), 2, 'L2', 70.0),
            (_profile('d', ['react'], 30), 0, None, None),
        ]

        job, survivors = self.service.retrieve(self.repo, 'job-1')

        self.assertEqual(job.title, 'Frontend Engineer')
        self.assertEqual([s.candidate.id for s in survivors], ['a', 'c'])
        self.assertEqual(survivors[1].resolution.matching, ['React', 'TypeScript'])
        self.assertEqual(survivors[1].candidate.highest_level, 'L2')
        print(f"  ✓ {len(survivors)} survivors")

    def test_02_unknown_job(self):
        self.repo.jobs.get_by_id.return_value = None
        with self.assertRaises(JobNotFoundException):
            self.service.retrieve(self.repo, 'missing')

    def test_03_malformed_job(self):
        self.repo.jobs.get_by_id.return_value = SimpleNamespace(
            id='job-1', title='x', required_skills=None, experience_level='mid', description=None,
        )
        with self.assertRaises(InvalidInputException):
            self.service.load_job(self.repo, 'job-1')

    def test_04_no_candidates(self):
        self.repo.candidates.list_with_interview_stats.return_value = []
        _, survivors = self.service.retrieve(self.repo, 'job-1')
        self.assertEqual(survivors, [])


if __name__ == '__main__':
    unittest.main()

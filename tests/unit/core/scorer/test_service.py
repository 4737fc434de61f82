#!/usr/bin/env python3
"""
Test suite for ScoringService.
"""

import unittest
from datetime import datetime, timezone

from core.config_loader import ScorerConfig
from core.matcher.models import CandidatePreliminary, CandidateRecord, JobRecord
from core.matcher.skills import resolve_skills
from core.scorer import ScoringService

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)


class TestScoringService(unittest.TestCase):
    """Unit tests for ScoringService - no database required."""

    def setUp(self):
        self.service = ScoringService(ScorerConfig())
        self.job = JobRecord(
            id='job-1',
            title='Full Stack Engineer',
            required_skills=['React', 'Node.js', 'AWS'],
            experience_level='mid',
        )

    def _candidate(self, id='c1', **fields):
        return CandidateRecord(id=id, **fields)

    def test_01_worked_example(self):
        print("\n📊 UNIT Test 1: Worked ranking example")
        candidate = self._candidate(
            full_name='Ada', email='ada@example.com', skills=['react', 'nodejs'],
            experience_years=4, highest_level='L2', avg_score=75, total_interviews=3,
        )

        result = self.service.rank(candidate, self.job, now=NOW)

        self.assertEqual(result.breakdown.to_dict(), {
            'skill_match': 27,
            'interview_quality': 16,
            'experience_match': 20,
            'github_quality': 0,
            'recency_bonus': 2,
        })
        self.assertEqual(result.score, 65)
        self.assertEqual(result.confidence, 'high')
        self.assertEqual(result.reasoning, " • ".join([
            "✓ Good skill match: 2/3 required skills",
            "✓ L2 interview with strong performance (75%)",
            "✓ Experience level matches perfectly (4 years)",
            "○ No GitHub portfolio verified",
            "✓ Active on platform (3 interviews)",
        ]))
        print(f"  ✓ Score: {result.score}")

    def test_02_empty_candidate_is_bounded(self):
        result = self.service.rank(self._candidate(), self.job, now=NOW)

        self.assertGreaterEqual(result.score, 0)
        self.assertLessEqual(result.score, 100)
        self.assertEqual(result.breakdown.skill_match, 0)
        self.assertEqual(result.confidence, 'low')
        self.assertEqual(len(result.reasoning.split(" • ")), 4)

    def test_03_to_match_fields(self):
        candidate = self._candidate(
            skills=['react'], experience_years=3, avg_score=72.5, highest_level='L1',
        )
        result = self.service.rank(candidate, self.job, now=NOW)
        match = self.service.to_match(candidate, result)

        self.assertEqual(match.candidate_name, 'Anonymous')
        self.assertEqual(match.matching_skills, ['React'])
        self.assertEqual(match.missing_skills, ['Node.js', 'AWS'])
        self.assertEqual(match.interview_score, 73)
        self.assertFalse(match.github_analyzed)
        self.assertEqual(match.quality_score, result.breakdown.interview_quality)

    def test_04_sorting_and_tie_break(self):
        skills = ['react', 'nodejs', 'aws']
        with_interview = self._candidate(
            'b', skills=skills, experience_years=4, highest_level='L1', avg_score=10,
        )
        plain = self._candidate('a', skills=skills, experience_years=4, total_interviews=1)
        weak = self._candidate('c', skills=['react'], experience_years=4)

        preliminary = [
            CandidatePreliminary(c, resolve_skills(c.skills, self.job.required_skills))
            for c in (weak, plain, with_interview)
        ]
        matches = self.service.score_candidates(preliminary, self.job, now=NOW)

        # a and b both score 62; b has interview quality points
        self.assertEqual([m.match_score for m in matches], [62, 62, 33])
        self.assertEqual([m.candidate_id for m in matches], ['b', 'a', 'c'])

    def test_05_limit(self):
        preliminary = [
            CandidatePreliminary(
                self._candidate(f"c{i}", skills=['react']),
                resolve_skills(['react'], self.job.required_skills),
            )
            for i in range(5)
        ]
        matches = self.service.score_candidates(preliminary, self.job, limit=2, now=NOW)

        self.assertEqual(len(matches), 2)
        self.assertEqual([m.candidate_id for m in matches], ['c0', 'c1'])

    def test_06_resolution_is_recomputed_when_omitted(self):
        candidate = self._candidate(skills=['react', 'nodejs', 'aws'], experience_years=4)
        result = self.service.rank(candidate, self.job, now=NOW)
        self.assertEqual(result.resolution.matching, ['React', 'Node.js', 'AWS'])


if __name__ == '__main__':
    unittest.main()

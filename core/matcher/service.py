#!/usr/bin/env python3
"""
Matcher Service - Stage 1: Candidate Retrieval.

Loads the job and every candidate, resolves skills once per candidate and
keeps only the candidates that pass the minimum-requirements gate.

Designed to be independent of the ScoringService: it hands over
CandidatePreliminary objects carrying the skill resolution so Stage 2 does not
redo it.
"""
from typing import Any, List, Tuple
import logging

from core.config_loader import MatcherConfig
from core.exceptions import JobNotFoundException
from core.matcher.models import CandidatePreliminary, CandidateRecord, JobRecord
from core.matcher.retrieval import passes_minimum_requirements
from core.matcher.skills import resolve_skills

logger = logging.getLogger(__name__)


class MatcherService:
    """
    Service for Stage 1: Retrieval Filter.

    The repository is passed per operation, the way the unit of work hands it
    out, so one service instance can serve many transactions.
    """

    def __init__(self, config: MatcherConfig):
        self.config = config

    def load_job(self, repo: Any, job_id: Any) -> JobRecord:
        """
        Raises:
            JobNotFoundException: No job posting with that id.
            InvalidInputException: The job posting is malformed.
        """
        job = repo.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFoundException(f"Job posting {job_id} not found")
        return JobRecord.from_orm(job)

    def load_candidates(self, repo: Any) -> List[CandidateRecord]:
        """All candidates in a stable (created_at, id) order."""
        rows = repo.candidates.list_with_interview_stats()
        return [CandidateRecord.from_row(*row) for row in rows]

    def filter_candidates(
        self,
        candidates: List[CandidateRecord],
        job: JobRecord
    ) -> List[CandidatePreliminary]:
        """Apply the Stage 1 gate, preserving input order."""
        survivors = []
        for candidate in candidates:
            resolution = resolve_skills(candidate.skills, job.required_skills)
            if passes_minimum_requirements(candidate, job, self.config, resolution):
                survivors.append(CandidatePreliminary(candidate=candidate, resolution=resolution))

        logger.info(
            f"Stage 1: {len(survivors)}/{len(candidates)} candidates passed for job {job.id}"
        )
        return survivors

    def retrieve(self, repo: Any, job_id: Any) -> Tuple[JobRecord, List[CandidatePreliminary]]:
        """Load the job and return ``(job, survivors)``."""
        job = self.load_job(repo, job_id)
        candidates = self.load_candidates(repo)
        return job, self.filter_candidates(candidates, job)

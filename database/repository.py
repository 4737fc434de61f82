import logging

from sqlalchemy.orm import Session

from database.repositories import (
    BaseRepository,
    JobPostingRepository,
    CandidateRepository,
    MatchRepository,
)

logger = logging.getLogger(__name__)


class HiringRepository(BaseRepository):
    """
    Facade over the per-table repositories, all bound to one Session.

    Usage:
        repo = HiringRepository(session)
        job = repo.jobs.get_by_id(job_id)
        rows = repo.candidates.list_with_interview_stats()
        repo.matches.get_matches_for_job(job_id)
    """

    def __init__(self, db: Session):
        super().__init__(db)
        self.jobs = JobPostingRepository(db)
        self.candidates = CandidateRepository(db)
        self.matches = MatchRepository(db)

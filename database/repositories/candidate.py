import logging
from typing import List, Optional, Any, Tuple, Dict

from sqlalchemy import select, func

from database.models import CandidateProfile, InterviewResult
from database.repositories.base import BaseRepository, as_uuid

logger = logging.getLogger(__name__)

# (profile, total_interviews, highest_level, avg_score)
CandidateRow = Tuple[CandidateProfile, int, Optional[str], Optional[float]]

class CandidateRepository(BaseRepository):
    def _aggregate_stmt(self):
        # Level strings sort as L1 < L2 < L3, so max() is the highest level
        return (
            select(
                CandidateProfile,
                func.count(InterviewResult.id),
                func.max(InterviewResult.level),
                func.avg(InterviewResult.score),
            )
            .outerjoin(InterviewResult, InterviewResult.candidate_id == CandidateProfile.id)
            .group_by(CandidateProfile.id)
        )

    def list_with_interview_stats(self) -> List[CandidateRow]:
        """All candidates with aggregated interview statistics, oldest first."""
        stmt = self._aggregate_stmt().order_by(CandidateProfile.created_at, CandidateProfile.id)
        return [tuple(row) for row in self.db.execute(stmt).all()]

    def get_by_id(self, candidate_id: Any) -> Optional[CandidateProfile]:
        stmt = select(CandidateProfile).where(CandidateProfile.id == as_uuid(candidate_id))
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, email: str, skills: Optional[List[str]] = None, **extra: Any) -> CandidateProfile:
        candidate = CandidateProfile(email=email, skills=list(skills or []), **extra)
        self.db.add(candidate)
        self.db.flush()
        return candidate

    def add_interview(
        self,
        candidate_id: Any,
        level: Optional[str],
        score: Optional[float],
        role: Optional[str] = None
    ) -> InterviewResult:
        interview = InterviewResult(candidate_id=as_uuid(candidate_id), level=level, score=score, role=role)
        self.db.add(interview)
        self.db.flush()
        return interview

    def save_github_analysis(
        self,
        candidate: CandidateProfile,
        username: str,
        analysis: Dict[str, Any],
        skills: List[str]
    ) -> CandidateProfile:
        candidate.github_username = username
        candidate.github_data = analysis
        candidate.skills = list(skills)
        self.db.flush()
        logger.info(f"Saved GitHub analysis for candidate {candidate.id} ({username})")
        return candidate

    def clear_github_analysis(self, candidate: CandidateProfile) -> None:
        candidate.github_data = None
        self.db.flush()
        logger.info(f"Cleared GitHub analysis for candidate {candidate.id}")

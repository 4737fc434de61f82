import logging
from typing import List, Any, Dict

from sqlalchemy import select, delete

from database.models import CandidateMatchRecord
from database.repositories.base import BaseRepository, as_uuid

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def get_matches_for_job(self, job_posting_id: Any) -> List[CandidateMatchRecord]:
        stmt = (
            select(CandidateMatchRecord)
            .where(CandidateMatchRecord.job_posting_id == as_uuid(job_posting_id))
            .order_by(CandidateMatchRecord.match_score.desc(), CandidateMatchRecord.candidate_id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def delete_matches_for_job(self, job_posting_id: Any) -> int:
        stmt = delete(CandidateMatchRecord).where(
            CandidateMatchRecord.job_posting_id == as_uuid(job_posting_id)
        )
        result = self.db.execute(stmt)
        return result.rowcount or 0

    def insert_matches(self, job_posting_id: Any, rows: List[Dict[str, Any]]) -> int:
        """Insert match rows ({candidate_id, match_score, reasoning, confidence})."""
        job_key = as_uuid(job_posting_id)
        for row in rows:
            self.db.add(CandidateMatchRecord(
                job_posting_id=job_key,
                candidate_id=as_uuid(row['candidate_id']),
                match_score=row['match_score'],
                reasoning=row.get('reasoning'),
                confidence=row.get('confidence'),
            ))
        self.db.flush()
        return len(rows)

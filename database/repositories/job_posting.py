import logging
from typing import List, Optional, Any

from sqlalchemy import select

from database.models import JobPosting
from database.repositories.base import BaseRepository, as_uuid

logger = logging.getLogger(__name__)

class JobPostingRepository(BaseRepository):
    def get_by_id(self, job_id: Any) -> Optional[JobPosting]:
        stmt = select(JobPosting).where(JobPosting.id == as_uuid(job_id))
        return self.db.execute(stmt).scalar_one_or_none()

    def lock_for_update(self, job_id: Any) -> Optional[JobPosting]:
        """Load the job row with SELECT ... FOR UPDATE (ignored by SQLite)."""
        stmt = select(JobPosting).where(JobPosting.id == as_uuid(job_id)).with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def create(
        self,
        title: str,
        required_skills: List[str],
        experience_level: str,
        description: Optional[str] = None,
        **extra: Any
    ) -> JobPosting:
        job = JobPosting(
            title=title,
            required_skills=list(required_skills),
            experience_level=experience_level,
            description=description,
            **extra
        )
        self.db.add(job)
        self.db.flush()
        return job

import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Integer, Uuid, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class CandidateMatchRecord(Base):
    """
    Cached ranking of a candidate for a job posting.

    The rows of a job are replaced wholesale on every re-match, so a job never
    shows a mix of two runs.
    """
    __tablename__ = 'candidate_matches'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    job_posting_id = Column(Uuid, ForeignKey('job_postings.id', ondelete='CASCADE'), nullable=False)
    candidate_id = Column(Uuid, ForeignKey('candidate_profiles.id', ondelete='CASCADE'), nullable=False)

    match_score = Column(Integer, nullable=False)
    reasoning = Column(Text)
    confidence = Column(Text)  # high|medium|low

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    job_posting = relationship("JobPosting", back_populates="matches")
    candidate = relationship("CandidateProfile", back_populates="matches")

    __table_args__ = (
        UniqueConstraint('job_posting_id', 'candidate_id', name='uq_candidate_match_job_candidate'),
        Index('idx_candidate_match_job_score', 'job_posting_id', 'match_score'),
    )

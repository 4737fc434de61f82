import uuid

from sqlalchemy import Column, Integer, Text, TIMESTAMP, Uuid, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class JobPosting(Base):
    __tablename__ = 'job_postings'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    recruiter_id = Column(Uuid, nullable=True)

    title = Column(Text, nullable=False)
    description = Column(Text)
    required_skills = Column(JSONType, nullable=False, default=list)
    experience_level = Column(Text, nullable=False)  # entry|mid|senior
    location = Column(Text)
    salary_min = Column(Integer)
    salary_max = Column(Integer)
    status = Column(Text, nullable=False, default='active')  # active|closed|draft

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    matches = relationship("CandidateMatchRecord", back_populates="job_posting", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_job_postings_recruiter', 'recruiter_id'),
        Index('idx_job_postings_status', 'status'),
    )

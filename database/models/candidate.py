import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Float, Uuid, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class CandidateProfile(Base):
    """
    Job seeker profile.

    ``github_data`` holds the latest GitHub analysis document (see
    core.github.models.GitHubAnalysis) or NULL when GitHub was never linked.
    """
    __tablename__ = 'candidate_profiles'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, nullable=False)
    full_name = Column(Text)
    target_role = Column(Text)
    location = Column(Text)
    experience_years = Column(Float)
    skills = Column(JSONType, nullable=False, default=list)

    github_username = Column(Text)
    github_data = Column(JSONType, nullable=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    interviews = relationship("InterviewResult", back_populates="candidate", cascade="all, delete-orphan")
    matches = relationship("CandidateMatchRecord", back_populates="candidate", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_candidate_profiles_created', 'created_at'),
    )


class InterviewResult(Base):
    """One completed AI interview. ``level`` is L1|L2|L3, ``score`` 0-100."""
    __tablename__ = 'interview_results'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    candidate_id = Column(Uuid, ForeignKey('candidate_profiles.id', ondelete='CASCADE'), nullable=False)
    role = Column(Text)
    level = Column(Text)
    score = Column(Float)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    candidate = relationship("CandidateProfile", back_populates="interviews")

    __table_args__ = (
        Index('idx_interview_results_candidate', 'candidate_id'),
    )

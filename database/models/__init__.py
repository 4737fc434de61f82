from .base import Base, JSONType
from .candidate import CandidateProfile, InterviewResult
from .job import JobPosting
from .match import CandidateMatchRecord

__all__ = [
    'Base',
    'JSONType',
    'CandidateProfile',
    'InterviewResult',
    'JobPosting',
    'CandidateMatchRecord',
]

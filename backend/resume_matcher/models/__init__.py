"""
SQLAlchemy Models
"""
from resume_matcher.models.document import DocumentStatus
from resume_matcher.models.job import Job
from resume_matcher.models.resume import Resume
from resume_matcher.models.matching import MatchRecord

__all__ = [
    "DocumentStatus",
    "Job",
    "Resume",
    "MatchRecord",
]

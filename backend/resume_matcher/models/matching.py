"""
Matching Models
"""
from sqlalchemy import Column, Float, Boolean, DateTime, ForeignKey, JSON, Uuid, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from resume_matcher.core.database import Base


class MatchRecord(Base):
    __tablename__ = "matches"

    # Primary Key
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    job_id = Column(Uuid, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    resume_id = Column(Uuid, ForeignKey("resumes.id", ondelete="CASCADE"), nullable=False, index=True)

    # Score Info
    similarity_score = Column(Float, nullable=False)  # 0.0 ~ 1.0
    is_match = Column(Boolean, nullable=False, default=False, index=True)

    match_details = Column(JSON().with_variant(JSONB(), "postgresql"))
    """
    {
        "threshold": 0.6,
        "processed_at": "2025-12-22T09:52:59.000000+00:00"
    }
    """

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    # Relationships
    job = relationship("Job", back_populates="matches")
    resume = relationship("Resume", back_populates="matches")

    __table_args__ = (
        # At most one record per (job, resume); upserts target this constraint
        UniqueConstraint("job_id", "resume_id", name="uq_matches_job_resume"),
    )

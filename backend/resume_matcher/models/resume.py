"""
Resume Model
"""
from sqlalchemy import Column, String, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from resume_matcher.core.database import Base
from resume_matcher.models.document import DocumentMixin


class Resume(DocumentMixin, Base):
    __tablename__ = "resumes"

    source_text_field = "resume_text"

    job_id = Column(Uuid, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)

    # Candidate Info
    candidate_name = Column(String(255))
    resume_text = Column(Text)  # extracted from the uploaded resume file

    # Relationships
    job = relationship("Job", back_populates="resumes")
    matches = relationship(
        "MatchRecord",
        back_populates="resume",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Resume {self.id} job={self.job_id} status={self.status}>"

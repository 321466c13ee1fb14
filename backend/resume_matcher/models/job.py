"""
Job Description Model
"""
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from resume_matcher.core.database import Base
from resume_matcher.models.document import DocumentMixin


class Job(DocumentMixin, Base):
    __tablename__ = "jobs"

    source_text_field = "description_text"

    # Basic Info
    title = Column(String(500), nullable=False, index=True)
    description_text = Column(Text)  # extracted from the uploaded JD file

    # Relationships
    resumes = relationship(
        "Resume",
        back_populates="job",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    matches = relationship(
        "MatchRecord",
        back_populates="job",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Job {self.id} {self.title!r} status={self.status}>"

"""
Resume Repository - resume data access
"""
from sqlalchemy.orm import Session
from typing import Iterable, List, Optional, Sequence
from uuid import UUID

from resume_matcher.models.resume import Resume
from resume_matcher.repositories.embedding_utils import validate_embedding


class ResumeRepository:
    """Resume data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, resume: Resume) -> Resume:
        """Create resume"""
        self.db.add(resume)
        self.db.commit()
        self.db.refresh(resume)
        return resume

    def get_by_id(self, resume_id: UUID) -> Optional[Resume]:
        """Get resume by ID"""
        return self.db.query(Resume).filter(Resume.id == resume_id).first()

    def get_by_job(self, job_id: UUID, newest_first: bool = False) -> List[Resume]:
        """All resumes uploaded for a job, in upload order unless asked otherwise"""
        query = self.db.query(Resume).filter(Resume.job_id == job_id)
        if newest_first:
            return query.order_by(Resume.created_at.desc(), Resume.id).all()
        return query.order_by(Resume.created_at, Resume.id).all()

    def update(self, resume: Resume) -> Resume:
        """Update resume"""
        self.db.commit()
        self.db.refresh(resume)
        return resume

    def set_embedding(self, resume: Resume, embedding: Sequence[float]) -> Resume:
        """Persist a freshly computed embedding (write-through cache)"""
        resume.embedding = validate_embedding(embedding)
        return self.update(resume)

    def delete_many(self, resume_ids: Iterable[UUID]) -> int:
        """Delete resumes by id set; their matches cascade"""
        ids = list(resume_ids)
        if not ids:
            return 0
        deleted = self.db.query(Resume).filter(
            Resume.id.in_(ids)
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted

"""
Job Repository - job description data access
"""
from sqlalchemy.orm import Session
from typing import Iterable, List, Optional, Sequence
from uuid import UUID

from resume_matcher.models.job import Job
from resume_matcher.repositories.embedding_utils import validate_embedding


class JobRepository:
    """Job description data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, job: Job) -> Job:
        """Create job"""
        self.db.add(job)
        self.db.commit()
        self.db.refresh(job)
        return job

    def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID"""
        return self.db.query(Job).filter(Job.id == job_id).first()

    def get_all(self, skip: int = 0, limit: int = 50) -> List[Job]:
        """List jobs, newest first"""
        return self.db.query(Job).order_by(
            Job.created_at.desc(), Job.id
        ).offset(skip).limit(limit).all()

    def update(self, job: Job) -> Job:
        """Update job"""
        self.db.commit()
        self.db.refresh(job)
        return job

    def set_embedding(self, job: Job, embedding: Sequence[float]) -> Job:
        """Persist a freshly computed embedding (write-through cache)"""
        job.embedding = validate_embedding(embedding)
        return self.update(job)

    def delete(self, job_id: UUID) -> bool:
        """Delete job; resumes and matches cascade"""
        job = self.get_by_id(job_id)
        if job:
            self.db.delete(job)
            self.db.commit()
            return True
        return False

    def delete_many(self, job_ids: Iterable[UUID]) -> int:
        """Delete jobs by id set; resumes and matches cascade"""
        ids = list(job_ids)
        if not ids:
            return 0
        deleted = self.db.query(Job).filter(
            Job.id.in_(ids)
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted

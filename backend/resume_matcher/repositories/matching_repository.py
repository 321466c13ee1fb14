"""
Matching Repository - match record data access
"""
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.dialects import postgresql, sqlite
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID
import uuid

from resume_matcher.models.matching import MatchRecord


_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class MatchingRepository:
    """Match record data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def upsert(
        self,
        job_id: UUID,
        resume_id: UUID,
        similarity_score: float,
        is_match: bool,
        match_details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Insert or overwrite the record for a (job, resume) pair

        Runs as a single INSERT ... ON CONFLICT (job_id, resume_id) DO UPDATE,
        so concurrent runs for the same job never produce duplicate rows.
        """
        dialect = self.db.get_bind().dialect.name
        try:
            insert = _DIALECT_INSERTS[dialect]
        except KeyError:
            raise NotImplementedError(f"Upsert not supported on dialect: {dialect}")

        stmt = insert(MatchRecord).values(
            id=uuid.uuid4(),
            job_id=job_id,
            resume_id=resume_id,
            similarity_score=similarity_score,
            is_match=is_match,
            match_details=match_details,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[MatchRecord.job_id, MatchRecord.resume_id],
            set_={
                "similarity_score": stmt.excluded.similarity_score,
                "is_match": stmt.excluded.is_match,
                "match_details": stmt.excluded.match_details,
            },
        )
        self.db.execute(stmt)
        self.db.commit()

    def get_by_id(self, match_id: UUID) -> Optional[MatchRecord]:
        """Get match record by ID"""
        return self.db.query(MatchRecord).filter(MatchRecord.id == match_id).first()

    def get_by_job_and_resume(
        self,
        job_id: UUID,
        resume_id: UUID
    ) -> Optional[MatchRecord]:
        """Match record for a specific job-resume pair"""
        return self.db.query(MatchRecord).filter(
            MatchRecord.job_id == job_id,
            MatchRecord.resume_id == resume_id
        ).first()

    def get_by_job(self, job_id: UUID, only_matches: bool = True) -> List[MatchRecord]:
        """Match records for a job with their resumes, best score first"""
        query = self.db.query(MatchRecord).options(
            joinedload(MatchRecord.resume)
        ).filter(MatchRecord.job_id == job_id)
        if only_matches:
            query = query.filter(MatchRecord.is_match.is_(True))
        return query.order_by(MatchRecord.similarity_score.desc()).all()

    def delete_many(self, match_ids: Iterable[UUID]) -> int:
        """Delete match records by id set"""
        ids = list(match_ids)
        if not ids:
            return 0
        deleted = self.db.query(MatchRecord).filter(
            MatchRecord.id.in_(ids)
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted

"""
Matching Service - ranks a job's resumes by embedding similarity
"""
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional
from uuid import UUID
from datetime import datetime, timezone
import time

from resume_matcher.core.config import settings
from resume_matcher.core.exceptions import EmbeddingFailed, JobNotFound
from resume_matcher.core.logging import logger
from resume_matcher.models.document import DocumentStatus
from resume_matcher.models.job import Job
from resume_matcher.models.resume import Resume
from resume_matcher.repositories.job_repository import JobRepository
from resume_matcher.repositories.matching_repository import MatchingRepository
from resume_matcher.repositories.resume_repository import ResumeRepository
from resume_matcher.services.ml.embedding import EmbeddingService, get_embedding_service
from resume_matcher.services.ml.similarity import SimilarityEngine


class MatchingService:
    """Matching service - job description vs. uploaded resumes"""

    def __init__(self, db: Session, embedding_service: Optional[EmbeddingService] = None):
        self.db = db
        self.jobs = JobRepository(db)
        self.resumes = ResumeRepository(db)
        self.matches = MatchingRepository(db)
        self.embedding_service = embedding_service or get_embedding_service()

    def match_resumes(
        self,
        job_id: UUID,
        threshold: Optional[float] = None
    ) -> Dict[str, Any]:
        """
        Score every resume of a job and persist the results

        Resumes are processed one at a time in load order. Failures to write
        an embedding or a match record are logged and the run moves on; only
        a missing job aborts it.

        Args:
            job_id: job to match
            threshold: minimum similarity for a match (default 0.6)

        Returns:
            {"job_id", "total_resumes", "matched_resumes", "threshold", "matches"}
            with matches sorted by similarity, best first

        Raises:
            JobNotFound: no job with this id
        """
        start_time = time.time()
        if threshold is None:
            threshold = settings.MIN_SIMILARITY_THRESHOLD
        engine = SimilarityEngine(threshold)

        # 1. Job
        job = self.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFound(job_id)

        # 2. Job embedding (compute once, then read from store)
        try:
            job_embedding = self._ensure_job_embedding(job)
        except EmbeddingFailed as e:
            logger.error(f"Could not embed job {job.id}: {e.message}")
            job_embedding = None

        # 3. Resumes
        resumes = self.resumes.get_by_job(job.id)
        logger.info(f"Matching {len(resumes)} resumes for job {job.id} (threshold={threshold})")

        # 4. Score each resume
        matches: List[Dict[str, Any]] = []
        for resume in resumes:
            if not resume.resume_text and resume.status != DocumentStatus.COMPLETED:
                logger.info(f"Skipping resume {resume.id} as it is not yet parsed.")
                continue

            resume_id = resume.id
            try:
                resume_embedding = self._ensure_resume_embedding(resume)
            except EmbeddingFailed as e:
                logger.error(f"Could not embed resume {resume_id}: {e.message}")
                continue

            if job_embedding is None or resume_embedding is None:
                continue

            similarity, matched = engine.evaluate(job_embedding, resume_embedding)

            try:
                self.matches.upsert(
                    job_id=job.id,
                    resume_id=resume_id,
                    similarity_score=similarity,
                    is_match=matched,
                    match_details={
                        "threshold": threshold,
                        "processed_at": datetime.now(timezone.utc).isoformat(),
                    },
                )
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.error(f"Failed to store match for resume {resume_id}: {e}")

            if matched:
                matches.append({
                    "resume_id": resume_id,
                    "candidate_name": resume.candidate_name,
                    "file_name": resume.file_name,
                    "similarity_score": similarity,
                })

        # 5. Rank (sort is stable, ties keep load order)
        matches.sort(key=lambda m: m["similarity_score"], reverse=True)

        processing_time = int((time.time() - start_time) * 1000)
        logger.info(
            f"Matching completed for job {job.id}: {len(matches)}/{len(resumes)} matched in {processing_time}ms"
        )

        return {
            "job_id": job.id,
            "total_resumes": len(resumes),
            "matched_resumes": len(matches),
            "threshold": threshold,
            "matches": matches,
        }

    def get_matches(self, job_id: UUID, only_matches: bool = True) -> List[Dict[str, Any]]:
        """
        Persisted match records for a job, best first

        Raises:
            JobNotFound: no job with this id
        """
        if self.jobs.get_by_id(job_id) is None:
            raise JobNotFound(job_id)

        return [
            {
                "id": record.id,
                "resume_id": record.resume_id,
                "candidate_name": record.resume.candidate_name if record.resume else None,
                "file_name": record.resume.file_name if record.resume else None,
                "similarity_score": record.similarity_score,
                "is_match": record.is_match,
                "match_details": record.match_details,
                "created_at": record.created_at,
            }
            for record in self.matches.get_by_job(job_id, only_matches=only_matches)
        ]

    def _ensure_job_embedding(self, job: Job):
        """Cached job embedding, computing and storing it on first use"""
        if job.has_embedding or not job.description_text:
            return job.embedding

        embedding = self.embedding_service.generate_embedding(job.description_text)
        try:
            self.jobs.set_embedding(job, embedding)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update embedding for job {job.id}: {e}")
        return embedding

    def _ensure_resume_embedding(self, resume: Resume):
        """Cached resume embedding, computing and storing it on first use"""
        if resume.has_embedding or not resume.resume_text:
            return resume.embedding

        logger.info(f"Generating embedding for resume {resume.id}...")
        resume_id = resume.id
        embedding = self.embedding_service.generate_embedding(resume.resume_text)
        try:
            self.resumes.set_embedding(resume, embedding)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update embedding for resume {resume_id}: {e}")
        return embedding

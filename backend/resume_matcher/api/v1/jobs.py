"""
Job API Routes
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from uuid import UUID

from resume_matcher.api.errors import domain_error_response, unexpected_error_response
from resume_matcher.core.database import get_db
from resume_matcher.core.exceptions import JobNotFound
from resume_matcher.models.document import DocumentStatus
from resume_matcher.models.job import Job
from resume_matcher.repositories.job_repository import JobRepository
from resume_matcher.repositories.resume_repository import ResumeRepository
from resume_matcher.schemas.job import (
    JobCreate,
    JobListResponse,
    JobResponse,
    ResumeListResponse,
    ResumeResponse,
)
from resume_matcher.schemas.matching import DeleteByIdsRequest, DeleteResponse, ErrorResponse

router = APIRouter()


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    request: JobCreate,
    db: Session = Depends(get_db)
):
    """Record an uploaded job description (pending extraction)"""
    try:
        job = JobRepository(db).create(Job(
            title=request.title,
            file_url=request.file_url,
            file_name=request.file_name,
            file_type=request.file_type,
            status=DocumentStatus.PENDING,
        ))
        return JobResponse.model_validate(job)
    except Exception as e:
        return unexpected_error_response(e)


@router.get("", response_model=JobListResponse)
def list_jobs(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db)
):
    """Job history, newest first"""
    try:
        jobs = JobRepository(db).get_all(skip=skip, limit=limit)
        return JobListResponse(jobs=[JobResponse.model_validate(job) for job in jobs])
    except Exception as e:
        return unexpected_error_response(e)


@router.delete("", response_model=DeleteResponse)
def delete_jobs(
    request: DeleteByIdsRequest,
    db: Session = Depends(get_db)
):
    """Delete jobs by id; their resumes and match records go with them"""
    try:
        deleted = JobRepository(db).delete_many(request.ids)
        return DeleteResponse(deleted=deleted)
    except Exception as e:
        return unexpected_error_response(e)


@router.get("/{job_id}", response_model=JobResponse, responses={404: {"model": ErrorResponse}})
def get_job(
    job_id: UUID,
    db: Session = Depends(get_db)
):
    """Job detail"""
    job = JobRepository(db).get_by_id(job_id)
    if job is None:
        return domain_error_response(JobNotFound(job_id))
    return JobResponse.model_validate(job)


@router.get("/{job_id}/resumes", response_model=ResumeListResponse, responses={404: {"model": ErrorResponse}})
def list_job_resumes(
    job_id: UUID,
    db: Session = Depends(get_db)
):
    """Resumes uploaded for a job, newest first"""
    if JobRepository(db).get_by_id(job_id) is None:
        return domain_error_response(JobNotFound(job_id))
    try:
        resumes = ResumeRepository(db).get_by_job(job_id, newest_first=True)
        return ResumeListResponse(
            job_id=job_id,
            resumes=[ResumeResponse.model_validate(resume) for resume in resumes],
        )
    except Exception as e:
        return unexpected_error_response(e)


@router.delete("/{job_id}", response_model=DeleteResponse, responses={404: {"model": ErrorResponse}})
def delete_job(
    job_id: UUID,
    db: Session = Depends(get_db)
):
    """Delete a job together with its resumes and match records"""
    try:
        if not JobRepository(db).delete(job_id):
            return domain_error_response(JobNotFound(job_id))
        return DeleteResponse(deleted=1)
    except Exception as e:
        return unexpected_error_response(e)

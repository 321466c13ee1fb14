"""
Resume API Routes
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from resume_matcher.api.errors import domain_error_response, unexpected_error_response
from resume_matcher.core.database import get_db
from resume_matcher.core.exceptions import JobNotFound
from resume_matcher.models.document import DocumentStatus
from resume_matcher.models.resume import Resume
from resume_matcher.repositories.job_repository import JobRepository
from resume_matcher.repositories.resume_repository import ResumeRepository
from resume_matcher.schemas.job import ResumeCreate, ResumeResponse
from resume_matcher.schemas.matching import DeleteByIdsRequest, DeleteResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=ResumeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
def create_resume(
    request: ResumeCreate,
    db: Session = Depends(get_db)
):
    """Record an uploaded resume for a job (pending extraction)"""
    if JobRepository(db).get_by_id(request.job_id) is None:
        return domain_error_response(JobNotFound(request.job_id))
    try:
        resume = ResumeRepository(db).create(Resume(
            job_id=request.job_id,
            candidate_name=request.candidate_name,
            file_url=request.file_url,
            file_name=request.file_name,
            file_type=request.file_type,
            status=DocumentStatus.PENDING,
        ))
        return ResumeResponse.model_validate(resume)
    except Exception as e:
        return unexpected_error_response(e)


@router.delete("", response_model=DeleteResponse)
def delete_resumes(
    request: DeleteByIdsRequest,
    db: Session = Depends(get_db)
):
    """Delete resumes by id; their match records go with them"""
    try:
        deleted = ResumeRepository(db).delete_many(request.ids)
        return DeleteResponse(deleted=deleted)
    except Exception as e:
        return unexpected_error_response(e)

"""
Matching API Routes
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID

from resume_matcher.api.errors import domain_error_response, unexpected_error_response
from resume_matcher.core.database import get_db
from resume_matcher.core.exceptions import ResumeMatcherError
from resume_matcher.dependencies import get_matching_service
from resume_matcher.repositories.matching_repository import MatchingRepository
from resume_matcher.schemas.matching import (
    DeleteByIdsRequest,
    DeleteResponse,
    ErrorResponse,
    JobMatchesResponse,
    MatchResumesRequest,
    MatchResumesResponse,
)
from resume_matcher.services.matching_service import MatchingService

router = APIRouter()

_ERRORS = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post("/match-resumes", response_model=MatchResumesResponse, responses=_ERRORS)
def match_resumes(
    request: MatchResumesRequest,
    service: MatchingService = Depends(get_matching_service)
):
    """
    Rank a job's resumes by similarity

    Every resume with extracted text is scored against the job and its match
    record upserted; the response lists the resumes at or above the
    threshold, best first.
    """
    try:
        summary = service.match_resumes(request.job_id, threshold=request.threshold)
        return MatchResumesResponse(**summary)
    except ResumeMatcherError as e:
        return domain_error_response(e)
    except Exception as e:
        return unexpected_error_response(e)


@router.get("/jobs/{job_id}/matches", response_model=JobMatchesResponse, responses=_ERRORS)
def list_job_matches(
    job_id: UUID,
    include_non_matches: bool = False,
    service: MatchingService = Depends(get_matching_service)
):
    """Persisted match records for a job (matches only unless asked otherwise)"""
    try:
        records = service.get_matches(job_id, only_matches=not include_non_matches)
        return JobMatchesResponse(job_id=job_id, matches=records)
    except ResumeMatcherError as e:
        return domain_error_response(e)
    except Exception as e:
        return unexpected_error_response(e)


@router.delete("/matches", response_model=DeleteResponse, responses=_ERRORS)
def delete_matches(
    request: DeleteByIdsRequest,
    db: Session = Depends(get_db)
):
    """Delete match records by id"""
    try:
        deleted = MatchingRepository(db).delete_many(request.ids)
        return DeleteResponse(deleted=deleted)
    except Exception as e:
        return unexpected_error_response(e)

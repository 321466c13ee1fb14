"""
Matching Schemas
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
from datetime import datetime
from uuid import UUID

from resume_matcher.core.config import settings


class CamelModel(BaseModel):
    """Accepts and emits the camelCase keys used by the web client"""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class MatchResumesRequest(CamelModel):
    """Match run request schema"""
    job_id: UUID = Field(..., alias="jobId")
    threshold: float = Field(settings.MIN_SIMILARITY_THRESHOLD, ge=0.0, le=1.0)


class RankedMatch(CamelModel):
    """One matched resume in a run summary"""
    resume_id: UUID = Field(..., alias="resumeId")
    candidate_name: Optional[str] = Field(None, alias="candidateName")
    file_name: str = Field(..., alias="fileName")
    similarity_score: float = Field(..., alias="similarityScore")


class MatchResumesResponse(CamelModel):
    """Match run summary schema"""
    success: bool = True
    job_id: UUID = Field(..., alias="jobId")
    total_resumes: int = Field(..., alias="totalResumes")
    matched_resumes: int = Field(..., alias="matchedResumes")
    threshold: float
    matches: List[RankedMatch]


class MatchRecordResponse(CamelModel):
    """Persisted match record schema"""
    id: UUID
    resume_id: UUID = Field(..., alias="resumeId")
    candidate_name: Optional[str] = Field(None, alias="candidateName")
    file_name: Optional[str] = Field(None, alias="fileName")
    similarity_score: float = Field(..., alias="similarityScore")
    is_match: bool = Field(..., alias="isMatch")
    match_details: Optional[Dict[str, Any]] = Field(None, alias="matchDetails")
    created_at: Optional[datetime] = Field(None, alias="createdAt")


class JobMatchesResponse(CamelModel):
    """Persisted matches for a job"""
    success: bool = True
    job_id: UUID = Field(..., alias="jobId")
    matches: List[MatchRecordResponse]


class DeleteByIdsRequest(CamelModel):
    """Bulk delete request schema"""
    ids: List[UUID] = Field(..., min_length=1)


class DeleteResponse(CamelModel):
    """Bulk delete response schema"""
    success: bool = True
    deleted: int


class ErrorResponse(BaseModel):
    """Failure payload returned by every endpoint"""
    success: bool = False
    error: str

"""
Job & Resume Record Schemas
"""
from pydantic import Field
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from resume_matcher.schemas.matching import CamelModel


class FileReference(CamelModel):
    """An uploaded file recorded before extraction"""
    file_url: str = Field(..., alias="fileUrl", min_length=1)
    file_name: str = Field(..., alias="fileName", min_length=1)
    file_type: str = Field(..., alias="fileType", min_length=1)


class JobCreate(FileReference):
    """Job creation schema"""
    title: str = Field(..., min_length=1, max_length=500)


class ResumeCreate(FileReference):
    """Resume creation schema"""
    job_id: UUID = Field(..., alias="jobId")
    candidate_name: Optional[str] = Field(None, alias="candidateName", max_length=255)


class DocumentResponse(CamelModel):
    """Fields shared by job and resume responses"""
    id: UUID
    file_url: str = Field(..., alias="fileUrl")
    file_name: str = Field(..., alias="fileName")
    file_type: str = Field(..., alias="fileType")
    status: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class JobResponse(DocumentResponse):
    """Job response schema"""
    title: str
    description_text: Optional[str] = Field(None, alias="descriptionText")


class ResumeResponse(DocumentResponse):
    """Resume response schema"""
    job_id: UUID = Field(..., alias="jobId")
    candidate_name: Optional[str] = Field(None, alias="candidateName")
    resume_text: Optional[str] = Field(None, alias="resumeText")


class JobListResponse(CamelModel):
    """Job history schema"""
    success: bool = True
    jobs: List[JobResponse]


class ResumeListResponse(CamelModel):
    """Resumes uploaded for a job"""
    success: bool = True
    job_id: UUID = Field(..., alias="jobId")
    resumes: List[ResumeResponse]

"""
Document Schemas
"""
from pydantic import Field
from typing import Literal
from uuid import UUID

from resume_matcher.schemas.matching import CamelModel


class ParseDocumentRequest(CamelModel):
    """Extraction request schema"""
    file_url: str = Field(..., alias="fileUrl", min_length=1)
    file_type: str = Field(..., alias="fileType", min_length=1)
    document_id: UUID = Field(..., alias="documentId")
    document_type: Literal["job", "resume"] = Field(..., alias="documentType")


class ParseDocumentResponse(CamelModel):
    """Extraction response schema"""
    success: bool = True
    text: str
    length: int


class UploadDocumentResponse(CamelModel):
    """Stored upload, ready to be recorded as a job or resume"""
    success: bool = True
    file_url: str = Field(..., alias="fileUrl")
    file_name: str = Field(..., alias="fileName")
    file_type: str = Field(..., alias="fileType")
    file_size: int = Field(..., alias="fileSize")

"""
Document API Routes - upload and text extraction
"""
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from typing import Literal

from resume_matcher.api.errors import domain_error_response, unexpected_error_response
from resume_matcher.core.exceptions import ResumeMatcherError
from resume_matcher.core.storage import StorageService, get_storage
from resume_matcher.dependencies import get_document_service
from resume_matcher.schemas.document import (
    ParseDocumentRequest,
    ParseDocumentResponse,
    UploadDocumentResponse,
)
from resume_matcher.schemas.matching import ErrorResponse
from resume_matcher.services.document_service import DocumentService
from resume_matcher.services.parsing.text_extractor import resolve_file_type

router = APIRouter()


@router.post(
    "/parse",
    response_model=ParseDocumentResponse,
    responses={code: {"model": ErrorResponse} for code in (400, 404, 422, 500, 502)},
)
def parse_document(
    request: ParseDocumentRequest,
    service: DocumentService = Depends(get_document_service)
):
    """
    Extract text from an uploaded job description or resume

    The file is fetched from ``fileUrl``, converted to normalized text and
    stored on the job/resume, which is then marked ``completed``.
    """
    try:
        result = service.parse_document(
            file_url=request.file_url,
            file_type=request.file_type,
            document_id=request.document_id,
            document_type=request.document_type,
        )
        return ParseDocumentResponse(**result)
    except ResumeMatcherError as e:
        return domain_error_response(e)
    except Exception as e:
        return unexpected_error_response(e)


@router.post(
    "/upload",
    response_model=UploadDocumentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={code: {"model": ErrorResponse} for code in (400, 500)},
)
def upload_document(
    file: UploadFile = File(...),
    document_type: Literal["job", "resume"] = Form(..., alias="documentType"),
    storage: StorageService = Depends(get_storage)
):
    """
    Store an uploaded job description or resume file

    Only PDF, DOCX, DOC and TXT files are accepted. The returned ``fileUrl``
    is what the job/resume record and ``/parse`` take.
    """
    try:
        file_type = file.content_type or file.filename
        resolve_file_type(file_type)
        saved = storage.save_bytes(file.file.read(), file.filename, subfolder=f"{document_type}s")
        return UploadDocumentResponse(
            file_url=saved["file_url"],
            file_name=saved["file_name"],
            file_type=file_type,
            file_size=saved["file_size"],
        )
    except ResumeMatcherError as e:
        return domain_error_response(e)
    except Exception as e:
        return unexpected_error_response(e)

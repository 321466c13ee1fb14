"""
Document Service - text extraction for uploaded jobs and resumes
"""
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional, Union
from uuid import UUID

from resume_matcher.core.exceptions import DocumentNotFound, ResumeMatcherError, ValidationError
from resume_matcher.core.logging import logger
from resume_matcher.core.storage import StorageService, get_storage
from resume_matcher.models.document import DocumentStatus
from resume_matcher.models.job import Job
from resume_matcher.models.resume import Resume
from resume_matcher.repositories.job_repository import JobRepository
from resume_matcher.repositories.resume_repository import ResumeRepository
from resume_matcher.services.parsing.text_extractor import TextExtractor, resolve_file_type


DOCUMENT_TYPES = ("job", "resume")


class DocumentService:
    """Fetches an uploaded file, extracts its text and stores it on the record"""

    def __init__(
        self,
        db: Session,
        storage: Optional[StorageService] = None,
        extractor: Optional[TextExtractor] = None
    ):
        self.db = db
        self.jobs = JobRepository(db)
        self.resumes = ResumeRepository(db)
        self.storage = storage or get_storage()
        self.extractor = extractor or TextExtractor()

    def parse_document(
        self,
        file_url: str,
        file_type: str,
        document_id: UUID,
        document_type: str
    ) -> Dict[str, Any]:
        """
        Extract text from a job or resume file and write it back

        The extracted text replaces the record's text, its status becomes
        ``completed`` and any cached embedding is dropped so the next match
        run recomputes it. An unsupported type is rejected before the record
        is touched; a failed extraction marks the record ``failed``.

        Returns:
            {"text", "length"}

        Raises:
            ValidationError: unknown document type
            DocumentNotFound: no such job/resume
            UnsupportedFormat: no extraction rule for the file type
            ExtractionFailed / StorageError: extraction or download broke
        """
        if document_type not in DOCUMENT_TYPES:
            raise ValidationError(
                f"documentType must be one of {', '.join(DOCUMENT_TYPES)}",
                field="documentType",
            )

        document = self._get_document(document_type, document_id)
        resolve_file_type(file_type)

        self._set_status(document, DocumentStatus.PROCESSING)
        try:
            content = self.storage.read_bytes(file_url)
            text = self.extractor.extract_text(content, file_type)
        except Exception as e:
            message = e.message if isinstance(e, ResumeMatcherError) else str(e)
            logger.error(f"Error parsing {document_type} {document_id}: {message}")
            # Never leave the record in "processing"
            self.db.rollback()
            self._set_status(document, DocumentStatus.FAILED)
            raise

        document.source_text = text
        document.embedding = None
        document.status = DocumentStatus.COMPLETED
        self.db.commit()
        logger.info(f"Parsed {document_type} {document_id}: {len(text)} chars")

        return {"text": text, "length": len(text)}

    def _get_document(self, document_type: str, document_id: UUID) -> Union[Job, Resume]:
        if document_type == "job":
            document = self.jobs.get_by_id(document_id)
        else:
            document = self.resumes.get_by_id(document_id)
        if document is None:
            raise DocumentNotFound(document_type, document_id)
        return document

    def _set_status(self, document: Union[Job, Resume], status: str) -> None:
        document.status = status
        self.db.commit()

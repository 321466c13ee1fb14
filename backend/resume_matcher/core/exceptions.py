"""
Domain Exceptions
"""
from typing import Any, Dict, Optional


class ResumeMatcherError(Exception):
    """Base exception for the matching pipeline"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging"""
        result = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ValidationError(ResumeMatcherError):
    """Raised when an invocation payload is malformed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
        super().__init__(message, error_code="VALIDATION_ERROR", details=details, **kwargs)


class UnsupportedFormat(ResumeMatcherError):
    """Declared file type has no extraction rule"""

    status_code = 400

    def __init__(self, file_type: str, **kwargs):
        self.file_type = file_type
        super().__init__(
            f"Unsupported file type: {file_type}",
            error_code="UNSUPPORTED_FORMAT",
            details={"file_type": file_type},
            **kwargs
        )


class ExtractionFailed(ResumeMatcherError):
    """Recognized file type whose parser broke"""

    status_code = 422

    def __init__(self, message: str, file_type: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, error_code="EXTRACTION_FAILED", details=details, **kwargs)


class JobNotFound(ResumeMatcherError):
    """Match run requested for a job that does not exist"""

    status_code = 404

    def __init__(self, job_id: Any, **kwargs):
        self.job_id = job_id
        super().__init__(
            "Job not found",
            error_code="JOB_NOT_FOUND",
            details={"job_id": str(job_id)},
            **kwargs
        )


class DocumentNotFound(ResumeMatcherError):
    """Extraction requested for a job/resume that does not exist"""

    status_code = 404

    def __init__(self, document_type: str, document_id: Any, **kwargs):
        super().__init__(
            f"{document_type.capitalize()} not found",
            error_code="DOCUMENT_NOT_FOUND",
            details={"document_type": document_type, "document_id": str(document_id)},
            **kwargs
        )


class EmbeddingFailed(ResumeMatcherError):
    """Both the model and the fallback embedding failed"""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="EMBEDDING_FAILED", **kwargs)


class StorageError(ResumeMatcherError):
    """Raised when file bytes cannot be fetched or stored"""

    status_code = 502

    def __init__(self, message: str, location: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if location:
            details["location"] = location
        super().__init__(message, error_code="STORAGE_ERROR", details=details, **kwargs)

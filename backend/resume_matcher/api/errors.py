"""
Structured error responses
"""
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from resume_matcher.core.exceptions import ResumeMatcherError
from resume_matcher.core.logging import logger


def error_response(status_code: int, message: str) -> JSONResponse:
    """``{"success": false, "error": message}`` with the given status"""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def domain_error_response(exc: ResumeMatcherError) -> JSONResponse:
    logger.error(f"Request failed: {exc.to_dict()}")
    return error_response(exc.status_code, exc.message)


def unexpected_error_response(exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Unknown error")


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request validation failures as a structured 400 payload"""
    message = _format_validation_errors(exc)
    logger.warning(f"Validation error on {request.method} {request.url.path}: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def domain_exception_handler(request: Request, exc: ResumeMatcherError) -> JSONResponse:
    return domain_error_response(exc)

"""
FastAPI Application Entry Point
"""
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from resume_matcher.api.errors import domain_exception_handler, validation_exception_handler
from resume_matcher.api.v1 import documents, jobs, matching, resumes
from resume_matcher.core.config import settings
from resume_matcher.core.database import init_db
from resume_matcher.core.exceptions import ResumeMatcherError
from resume_matcher.core.logging import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("Starting Resume-Matcher Backend...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Embedding Model: {settings.EMBEDDING_MODEL} via {settings.EMBEDDING_SERVICE_URL}")
    init_db()

    yield

    logger.info("Shutting down Resume-Matcher Backend...")


def create_app() -> FastAPI:
    """Build the API application"""
    app = FastAPI(
        title="Resume-Matcher API",
        description="Ranks uploaded resumes against a job description by embedding similarity",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ResumeMatcherError, domain_exception_handler)

    app.include_router(jobs.router, prefix="/api/v1/jobs", tags=["Jobs"])
    app.include_router(resumes.router, prefix="/api/v1/resumes", tags=["Resumes"])
    app.include_router(documents.router, prefix="/api/v1/documents", tags=["Documents"])
    app.include_router(matching.router, prefix="/api/v1/matching", tags=["Matching"])

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint"""
        return {
            "message": "Welcome to Resume-Matcher API",
            "version": "0.1.0",
            "docs": "/docs",
            "health": "/health",
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
        }

    return app


app = create_app()

"""
Dependency Injection
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from resume_matcher.core.database import get_db
from resume_matcher.core.storage import StorageService, get_storage
from resume_matcher.services.document_service import DocumentService
from resume_matcher.services.matching_service import MatchingService
from resume_matcher.services.ml.embedding import EmbeddingService, get_embedding_service


def get_matching_service(
    db: Session = Depends(get_db),
    embedding_service: EmbeddingService = Depends(get_embedding_service),
) -> MatchingService:
    """Matching service bound to the request's DB session"""
    return MatchingService(db, embedding_service=embedding_service)


def get_document_service(
    db: Session = Depends(get_db),
    storage: StorageService = Depends(get_storage),
) -> DocumentService:
    """Document service bound to the request's DB session"""
    return DocumentService(db, storage=storage)

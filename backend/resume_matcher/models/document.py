"""
Document Base - columns shared by job descriptions and resumes
"""
from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.sql import func
from pgvector.sqlalchemy import Vector
import uuid

from resume_matcher.core.config import settings


class DocumentStatus:
    """Processing status of an uploaded document"""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class DocumentMixin:
    """
    Abstract document: an uploaded file, its extracted text and its cached
    embedding. Subclasses name the column holding the extracted text in
    ``source_text_field``.
    """

    source_text_field = None

    # Primary Key
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # File Info
    file_url = Column(String(1000), nullable=False)
    file_name = Column(String(500), nullable=False)
    file_type = Column(String(200), nullable=False)  # pdf, docx, txt or a MIME type

    # AI Related
    embedding = Column(Vector(settings.EMBEDDING_DIMENSION))  # pgvector
    status = Column(String(20), nullable=False, default=DocumentStatus.PENDING, index=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def source_text(self):
        return getattr(self, self.source_text_field)

    @source_text.setter
    def source_text(self, value):
        setattr(self, self.source_text_field, value)

    @property
    def has_embedding(self) -> bool:
        # pgvector hands back numpy arrays, which have no truth value
        return self.embedding is not None

"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Dict, List
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from resume_matcher.core.database import create_db_engine, get_db, init_db
from resume_matcher.core.storage import StorageService, get_storage
from resume_matcher.models import DocumentStatus, Job, Resume
from resume_matcher.services.ml.embedding import EmbeddingService, HashEmbedder, get_embedding_service


DIMENSION = 384


class UnavailableEmbedder:
    """Model client stand-in that always fails, forcing the hash fallback."""

    dimension = DIMENSION

    def __init__(self):
        self.calls = 0

    def embed(self, text: str) -> List[float]:
        self.calls += 1
        raise RuntimeError("Cannot connect to embedding service")


class KeywordEmbedder:
    """Model client stand-in mapping known texts onto fixed unit vectors."""

    dimension = DIMENSION

    def __init__(self, vectors: Dict[str, List[float]]):
        self.vectors = vectors
        self.calls: List[str] = []

    def embed(self, text: str) -> List[float]:
        self.calls.append(text)
        return self.vectors[text]


def unit_vector(*components: float) -> List[float]:
    """384-dim vector with the given leading components, rest zero."""
    return list(components) + [0.0] * (DIMENSION - len(components))


@pytest.fixture
def engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Database session bound to the in-memory engine."""
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def fallback_embedding_service() -> EmbeddingService:
    """Embedding service whose model is down, so every vector is the hash fallback."""
    return EmbeddingService(primary=UnavailableEmbedder(), fallback=HashEmbedder())


@pytest.fixture
def storage(tmp_path) -> StorageService:
    """Local storage rooted in a temporary directory."""
    return StorageService(upload_dir=str(tmp_path / "uploads"))


@pytest.fixture
def make_job(db_session):
    """Factory for persisted jobs."""
    def _make_job(description_text=None, status=DocumentStatus.COMPLETED, **kwargs) -> Job:
        job = Job(
            title=kwargs.pop("title", "Backend Engineer"),
            file_url=kwargs.pop("file_url", "/uploads/jd.txt"),
            file_name=kwargs.pop("file_name", "jd.txt"),
            file_type=kwargs.pop("file_type", "txt"),
            description_text=description_text,
            status=status,
            **kwargs,
        )
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job
    return _make_job


@pytest.fixture
def make_resume(db_session):
    """Factory for persisted resumes."""
    def _make_resume(job, resume_text=None, status=DocumentStatus.COMPLETED, **kwargs) -> Resume:
        resume = Resume(
            job_id=job.id,
            candidate_name=kwargs.pop("candidate_name", None),
            file_url=kwargs.pop("file_url", "/uploads/cv.txt"),
            file_name=kwargs.pop("file_name", "cv.txt"),
            file_type=kwargs.pop("file_type", "txt"),
            resume_text=resume_text,
            status=status,
            **kwargs,
        )
        db_session.add(resume)
        db_session.commit()
        db_session.refresh(resume)
        return resume
    return _make_resume


@pytest.fixture
def client(db_session, fallback_embedding_service, storage):
    """API client wired to the in-memory database and fallback embeddings."""
    from resume_matcher.main import create_app

    app = create_app()
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_embedding_service] = lambda: fallback_embedding_service
    app.dependency_overrides[get_storage] = lambda: storage
    return TestClient(app)

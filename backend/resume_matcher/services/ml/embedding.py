"""
Embedding Service - text to fixed-length unit vectors

The primary path calls the embedding model service over HTTP; whenever that
call fails the deterministic hash embedding is used instead.
"""
import re
from typing import List, Optional, Protocol

import httpx
import numpy as np

from resume_matcher.core.config import settings
from resume_matcher.core.exceptions import EmbeddingFailed
from resume_matcher.core.logging import logger


class Embedder(Protocol):
    """Anything that turns text into a vector"""

    dimension: int

    def embed(self, text: str) -> List[float]:
        ...


class ModelEmbedder:
    """Sentence-embedding model client (HTTP)"""

    def __init__(
        self,
        service_url: Optional[str] = None,
        dimension: Optional[int] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None
    ):
        self.service_url = (service_url or settings.EMBEDDING_SERVICE_URL).rstrip("/")
        self.dimension = dimension or settings.EMBEDDING_DIMENSION
        self.timeout = timeout or settings.EMBEDDING_TIMEOUT
        self.client = client or httpx.Client(timeout=self.timeout)

    def embed(self, text: str) -> List[float]:
        """
        Mean-pooled, normalized embedding from the model service

        Args:
            text: normalized input text

        Returns:
            embedding vector of ``self.dimension`` floats

        Raises:
            RuntimeError: the service is unreachable, errors or answers with
                a vector of the wrong size
        """
        try:
            response = self.client.post(
                f"{self.service_url}/embed",
                json={"text": text or ""},
            )
        except httpx.TimeoutException:
            raise RuntimeError(f"Embedding service timeout after {self.timeout}s")
        except httpx.HTTPError as e:
            raise RuntimeError(f"Cannot reach embedding service at {self.service_url}: {e}")

        if response.status_code != 200:
            raise RuntimeError(f"Embedding API error: {response.status_code} - {response.text}")

        embedding = response.json().get("embedding") or []
        if len(embedding) != self.dimension:
            raise RuntimeError(
                f"Embedding API returned {len(embedding)} dimensions, expected {self.dimension}"
            )
        return [float(v) for v in embedding]


class HashEmbedder:
    """
    Deterministic bag-of-characters embedding

    Crude on purpose: it only keeps the pipeline moving while the model is
    unavailable. The arithmetic must stay exactly as is so stored fallback
    vectors remain comparable across runs.
    """

    def __init__(self, dimension: Optional[int] = None):
        self.dimension = dimension or settings.EMBEDDING_DIMENSION

    def embed(self, text: str) -> List[float]:
        vector = np.zeros(self.dimension, dtype=np.float64)
        words = re.split(r"\s+", (text or "").lower())

        for i, word in enumerate(words[: self.dimension]):
            for j, char in enumerate(word):
                vector[(i + j) % self.dimension] += ord(char) / 1000

        magnitude = float(np.sqrt(np.sum(vector * vector)))
        if magnitude > 0:
            vector = vector / magnitude
        return vector.tolist()


class EmbeddingService:
    """Embedding generation with model-then-fallback strategy"""

    def __init__(self, primary: Optional[Embedder] = None, fallback: Optional[Embedder] = None):
        self.primary = primary if primary is not None else ModelEmbedder()
        self.fallback = fallback if fallback is not None else HashEmbedder()
        self.dimension = self.fallback.dimension

    def generate_embedding(self, text: str) -> List[float]:
        """
        Generate an embedding for normalized text

        Args:
            text: normalized input text

        Returns:
            unit-length vector (all zeros for empty input)

        Raises:
            EmbeddingFailed: only when the fallback itself breaks
        """
        try:
            return self.primary.embed(text)
        except Exception as e:
            logger.warning(f"Embedding model unavailable, using hash fallback: {e}")

        try:
            return self.fallback.embed(text)
        except Exception as e:
            raise EmbeddingFailed(f"Error generating fallback embedding: {e}", cause=e)


# Global instance (singleton)
_embedding_service = None


def get_embedding_service() -> EmbeddingService:
    """Get the embedding service instance (singleton)"""
    global _embedding_service
    if _embedding_service is None:
        _embedding_service = EmbeddingService()
    return _embedding_service

"""
Similarity Engine - cosine similarity and the match decision
"""
from typing import Sequence, Tuple

import numpy as np

from resume_matcher.core.config import settings


DEFAULT_THRESHOLD = settings.MIN_SIMILARITY_THRESHOLD


def cosine_similarity(embedding1: Sequence[float], embedding2: Sequence[float]) -> float:
    """
    Cosine similarity between two embeddings

    Vectors of different length, or a zero vector on either side, give 0.0
    instead of an error.

    Args:
        embedding1: first embedding
        embedding2: second embedding

    Returns:
        dot(a, b) / (|a| * |b|)
    """
    vec1 = np.asarray(embedding1, dtype=np.float64)
    vec2 = np.asarray(embedding2, dtype=np.float64)

    if vec1.shape != vec2.shape:
        return 0.0

    magnitude1 = float(np.linalg.norm(vec1))
    magnitude2 = float(np.linalg.norm(vec2))
    if magnitude1 == 0.0 or magnitude2 == 0.0:
        return 0.0

    return float(np.dot(vec1, vec2)) / (magnitude1 * magnitude2)


def is_match(similarity: float, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Match decision; the threshold is used as given"""
    return similarity >= threshold


class SimilarityEngine:
    """Scores a job/resume embedding pair against a threshold"""

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        self.threshold = threshold

    def similarity(self, embedding1: Sequence[float], embedding2: Sequence[float]) -> float:
        return cosine_similarity(embedding1, embedding2)

    def score(self, embedding1: Sequence[float], embedding2: Sequence[float]) -> float:
        """Cosine similarity clipped to the 0~1 range stored on match records"""
        return float(np.clip(self.similarity(embedding1, embedding2), 0.0, 1.0))

    def evaluate(
        self,
        embedding1: Sequence[float],
        embedding2: Sequence[float]
    ) -> Tuple[float, bool]:
        """(score, is_match) for a pair"""
        score = self.score(embedding1, embedding2)
        return score, is_match(score, self.threshold)

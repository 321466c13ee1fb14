"""
Embedding column helpers
"""
from typing import List, Sequence

from resume_matcher.core.config import settings


def validate_embedding(embedding: Sequence[float]) -> List[float]:
    """Check an embedding has the configured dimension before it is stored"""
    values = [float(v) for v in embedding]
    if len(values) != settings.EMBEDDING_DIMENSION:
        raise ValueError(
            f"Embedding must have {settings.EMBEDDING_DIMENSION} dimensions, got {len(values)}"
        )
    return values

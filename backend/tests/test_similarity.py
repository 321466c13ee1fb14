"""
Tests for cosine similarity and the match decision.
"""

import pytest

from resume_matcher.services.ml.similarity import SimilarityEngine, cosine_similarity, is_match


class TestCosineSimilarity:
    """Test cosine similarity edge cases."""

    def test_identical_vectors(self):
        assert cosine_similarity([0.3, 0.4, 0.5], [0.3, 0.4, 0.5]) == pytest.approx(1.0)

    def test_symmetric(self):
        a, b = [1.0, 2.0, 3.0], [-2.0, 0.5, 4.0]
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))

    def test_orthogonal(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0

    def test_opposite(self):
        assert cosine_similarity([1.0, 0.0], [-1.0, 0.0]) == pytest.approx(-1.0)

    def test_unequal_length_is_zero(self):
        assert cosine_similarity([1.0, 0.0, 0.0], [1.0, 0.0]) == 0.0

    def test_zero_vector_is_zero(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 0.0]) == 0.0
        assert cosine_similarity([1.0, 0.0], [0.0, 0.0]) == 0.0


class TestIsMatch:
    """Test the threshold comparison."""

    def test_at_threshold_matches(self):
        assert is_match(0.6, 0.6) is True

    def test_below_threshold(self):
        assert is_match(0.5999, 0.6) is False

    def test_threshold_is_not_clamped(self):
        assert is_match(1.0, 1.5) is False
        assert is_match(-0.5, -1.0) is True


class TestSimilarityEngine:
    """Test scoring and evaluation."""

    def test_negative_similarity_is_clipped(self):
        engine = SimilarityEngine(threshold=0.6)
        assert engine.score([1.0, 0.0], [-1.0, 0.0]) == 0.0

    def test_evaluate(self):
        engine = SimilarityEngine(threshold=0.8)
        score, matched = engine.evaluate([1.0, 0.0], [0.9, 0.19 ** 0.5])
        assert score == pytest.approx(0.9)
        assert matched is True

        score, matched = engine.evaluate([1.0, 0.0], [0.7, 0.51 ** 0.5])
        assert score == pytest.approx(0.7)
        assert matched is False

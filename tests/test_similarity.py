"""
Tests for cosine similarity and tag overlap.
"""

import pytest

from addlee.similarity import cosine_similarity, tag_overlap


class TestCosineSimilarity:
    """Test sparse cosine similarity."""

    def test_identical_vectors(self):
        vector = {"spa": 0.4, "resort": 0.9, "luxury": 0.1}
        assert cosine_similarity(vector, vector) == pytest.approx(1.0)

    def test_scaled_vector_is_identical_in_direction(self):
        assert cosine_similarity({"spa": 1.0, "hotel": 2.0}, {"spa": 3.0, "hotel": 6.0}) == pytest.approx(1.0)

    def test_symmetric(self):
        a = {"spa": 0.3, "resort": 0.2}
        b = {"spa": 0.1, "hotel": 0.7, "resort": 0.05}
        assert cosine_similarity(a, b) == cosine_similarity(b, a)

    def test_disjoint_keys(self):
        assert cosine_similarity({"spa": 1.0}, {"hotel": 1.0}) == 0.0

    def test_known_value(self):
        # (1*1) / (sqrt(2) * 1)
        assert cosine_similarity({"a1": 1.0, "b1": 1.0}, {"a1": 1.0}) == pytest.approx(2 ** -0.5)

    @pytest.mark.parametrize("a, b", [
        ({}, {}),
        ({}, {"spa": 1.0}),
        ({"spa": 1.0}, {}),
        ({"spa": 0.0}, {"spa": 1.0}),
    ])
    def test_zero_norm_gives_zero(self, a, b):
        assert cosine_similarity(a, b) == 0.0

    def test_result_in_unit_interval(self):
        a = {"x%d" % i: 0.1 * i for i in range(1, 20)}
        b = {"x%d" % i: 1.0 / i for i in range(5, 30)}
        assert 0.0 <= cosine_similarity(a, b) <= 1.0
        assert 0.0 <= cosine_similarity(a, a) <= 1.0


class TestTagOverlap:
    """Test Jaccard tag overlap."""

    def test_case_insensitive(self):
        assert tag_overlap(["Spa"], ["spa"]) == 1.0

    def test_jaccard_value(self):
        assert tag_overlap(["Spa", "Wellness"], ["Spa", "Luxury"]) == pytest.approx(1 / 3)

    def test_symmetric(self):
        a = ["Urban", "Nightlife", "Photography", "City"]
        b = ["Boutique", "NYC", "urban", "CITY"]
        assert tag_overlap(a, b) == tag_overlap(b, a) == pytest.approx(2 / 6)

    def test_duplicates_collapse(self):
        assert tag_overlap(["Spa", "SPA", "spa"], ["Spa"]) == 1.0

    def test_disjoint(self):
        assert tag_overlap(["Beach"], ["Mountain"]) == 0.0

    @pytest.mark.parametrize("a, b", [([], []), (None, None), (None, []), ([], None)])
    def test_empty_union(self, a, b):
        assert tag_overlap(a, b) == 0.0

    def test_one_side_empty(self):
        assert tag_overlap(["Spa"], []) == 0.0

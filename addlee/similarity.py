"""
Similarity scoring for Addlee - cosine similarity and tag overlap.
"""

from typing import Iterable, Mapping, Optional

import numpy as np


def cosine_similarity(vec_a: Mapping[str, float], vec_b: Mapping[str, float]) -> float:
    """
    Calculate cosine similarity between two sparse term vectors.

    Both vectors are aligned over the union of their keys (absent keys count
    as 0). Returns 0.0 when either vector has zero norm.
    """
    keys = sorted(set(vec_a) | set(vec_b))
    if not keys:
        return 0.0

    a = np.array([vec_a.get(key, 0.0) for key in keys], dtype=np.float64)
    b = np.array([vec_b.get(key, 0.0) for key in keys], dtype=np.float64)

    magnitude = np.linalg.norm(a) * np.linalg.norm(b)
    if magnitude == 0:
        return 0.0

    similarity = np.dot(a, b) / magnitude
    # Rounding error can push identical vectors a hair past 1
    return float(np.clip(similarity, 0.0, 1.0))


def normalize_tags(tags: Optional[Iterable[str]]) -> set:
    """Lowercased tag set; None is an empty set."""
    if tags is None:
        return set()
    if isinstance(tags, str):
        tags = [tags]
    return {str(tag).lower() for tag in tags}


def tag_overlap(tags_a: Optional[Iterable[str]], tags_b: Optional[Iterable[str]]) -> float:
    """Case-insensitive Jaccard index of two tag collections (0.0 if both empty)."""
    set_a = normalize_tags(tags_a)
    set_b = normalize_tags(tags_b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)

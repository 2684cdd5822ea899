"""
Text vectorization for Addlee - tokenization and TF-IDF term vectors.

Vectors are sparse dicts mapping token to weight. IDF weights are built from
the corpus handed in and are never cached between calls.
"""

import logging
import math
import re
from collections import Counter
from typing import Dict, Iterable, List, Optional

from .profiles import Profile

logger = logging.getLogger(__name__)

TermVector = Dict[str, float]

_NON_WORD = re.compile(r'[^a-z0-9\s]')


def tokenize(text: Optional[str]) -> List[str]:
    """
    Split text into lowercase word tokens.

    Punctuation and any other character outside a-z, 0-9 and whitespace is
    removed (not replaced), so "boutique-hotel" becomes "boutiquehotel".
    Single-character tokens are dropped.
    """
    if not text:
        return []
    cleaned = _NON_WORD.sub('', text.lower())
    return [word for word in cleaned.split() if len(word) > 1]


def term_frequency(tokens: List[str]) -> Dict[str, float]:
    """Fraction of the token list taken up by each distinct token."""
    total = len(tokens) or 1
    return {token: count / total for token, count in Counter(tokens).items()}


def inverse_document_frequency(documents: Iterable[str]) -> Dict[str, float]:
    """
    Compute IDF weights across a collection of raw text documents.

    idf(token) = ln(N / documents containing token) + 1, so a token present
    in every document still weighs 1.

    Args:
        documents: Raw document texts

    Returns:
        Mapping of every token seen in the corpus to its IDF weight
    """
    document_counts: Counter = Counter()
    n = 0
    for document in documents:
        n += 1
        document_counts.update(set(tokenize(document)))

    return {token: math.log(n / count) + 1 for token, count in document_counts.items()}


def vectorize(text: Optional[str], idf: Dict[str, float]) -> TermVector:
    """TF-IDF vector for text; tokens unknown to the idf mapping are dropped."""
    vector = {}
    for token, tf in term_frequency(tokenize(text)).items():
        weight = idf.get(token)
        if weight:
            vector[token] = tf * weight
    return vector


def profile_text(profile: Profile) -> str:
    """Scoring text for a profile: name, description and tags."""
    return ' '.join([profile.name, profile.description, *profile.tags])


def vectorize_profiles(profiles: List[Profile], idf: Dict[str, float]) -> List[TermVector]:
    """Vectorize profiles in order against shared IDF weights."""
    return [vectorize(profile_text(profile), idf) for profile in profiles]


def build_corpus_idf(*collections: List[Profile]) -> Dict[str, float]:
    """IDF weights over the union of every profile in the given collections."""
    texts = [profile_text(profile) for collection in collections for profile in collection]
    idf = inverse_document_frequency(texts)
    logger.debug("Built IDF over %d documents (%d distinct tokens)", len(texts), len(idf))
    return idf

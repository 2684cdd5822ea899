"""
Matching engine for Addlee - pairwise scoring, explanations and ranking.

Every source profile is scored against every target profile. Text similarity
(TF-IDF cosine) and tag overlap (Jaccard) are blended 60/40, remapped to a
50-99 display score, explained in plain language and ranked best-first.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .config import check_value, get_config_manager
from .profiles import Profile, as_profiles
from .similarity import cosine_similarity, normalize_tags, tag_overlap
from .vectorizer import build_corpus_idf, vectorize_profiles

logger = logging.getLogger(__name__)

TEXT_WEIGHT = 0.6
TAG_WEIGHT = 0.4

# Raw scores (0-1) are shifted into a 50-99 display range: low-overlap pairs
# still show a baseline affinity, perfect pairs stop short of 100.
SCORE_OFFSET = 50
MAX_DISPLAY_SCORE = 99

STRONG_ALIGNMENT_THRESHOLD = 0.3
GOOD_ALIGNMENT_THRESHOLD = 0.15
HIGH_ENGAGEMENT_THRESHOLD = 4.0

TOP_TIER_MIN_SCORE = 80
GOOD_TIER_MIN_SCORE = 65

_LEADING_NUMBER = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')


@dataclass(frozen=True)
class MatchResult:
    """A scored source/target pair."""
    source: Profile
    target: Profile
    score: int
    text_similarity: int
    tag_overlap: int
    explanation: str
    raw_score: float = 0.0

    @property
    def tier(self) -> str:
        if self.score >= TOP_TIER_MIN_SCORE:
            return "top"
        if self.score >= GOOD_TIER_MIN_SCORE:
            return "good"
        return "other"

    def to_dict(self) -> Dict[str, Any]:
        """Flat dict form used by exports."""
        return {
            'source_id': self.source.id,
            'source_name': self.source.name,
            'target_id': self.target.id,
            'target_name': self.target.name,
            'score': self.score,
            'text_similarity': self.text_similarity,
            'tag_overlap': self.tag_overlap,
            'raw_score': round(self.raw_score, 4),
            'tier': self.tier,
            'explanation': self.explanation,
        }


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def percentage(value: float) -> int:
    """Integer percentage of a 0-1 sub-score."""
    return round_half_up(value * 100)


def blend_scores(text_similarity: float, tag_score: float) -> float:
    """Weighted combination of text similarity and tag overlap."""
    return TEXT_WEIGHT * text_similarity + TAG_WEIGHT * tag_score


def display_score(raw_score: float) -> int:
    """Map a raw 0-1 score onto the 50-99 display range."""
    return min(round_half_up(raw_score * 100 + SCORE_OFFSET), MAX_DISPLAY_SCORE)


def parse_engagement(value: Any) -> Optional[float]:
    """
    Read the leading number out of an engagement figure.

    "4.2%" gives 4.2, "5" gives 5.0; values with no leading number give None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    found = _LEADING_NUMBER.match(str(value))
    if not found:
        return None
    return float(found.group(0))


def shared_tags(source: Profile, target: Profile) -> List[str]:
    """Lowercased tags common to both profiles, in the source's tag order."""
    target_tags = normalize_tags(target.tags)
    shared = []
    for tag in source.tags:
        tag = tag.lower()
        if tag in target_tags and tag not in shared:
            shared.append(tag)
    return shared


def generate_explanation(source: Profile, target: Profile, text_similarity: float) -> str:
    """Build a human-readable explanation for why a pair was matched."""
    parts = []

    shared = shared_tags(source, target)
    if shared:
        parts.append(f"Both share interests in {', '.join(shared)}")

    if text_similarity > STRONG_ALIGNMENT_THRESHOLD:
        parts.append(f"{source.name}'s content style aligns strongly with {target.name}'s brand")
    elif text_similarity > GOOD_ALIGNMENT_THRESHOLD:
        parts.append(f"{source.name}'s profile shows good alignment with {target.name}'s target audience")

    engagement = parse_engagement(source.engagement)
    if engagement is not None and engagement > HIGH_ENGAGEMENT_THRESHOLD:
        parts.append(f"High engagement rate ({source.engagement}) suggests strong audience connection")

    if not parts:
        parts.append(
            f"{source.name}'s creative approach could bring a fresh perspective "
            f"to {target.name}'s content strategy"
        )

    return '. '.join(parts) + '.'


def match(set_a: Optional[Iterable[Any]], set_b: Optional[Iterable[Any]]) -> List[MatchResult]:
    """
    Score and rank every pair across two profile collections.

    IDF weights are computed fresh from the union of both collections on
    each call. Pairs with equal display scores keep cross-product order:
    source index first, then target index.

    Args:
        set_a: Source profiles (Profile objects or mappings)
        set_b: Target profiles (Profile objects or mappings)

    Returns:
        List of MatchResult objects sorted by display score, best first
    """
    sources = as_profiles(set_a)
    targets = as_profiles(set_b)
    if not sources or not targets:
        return []

    idf = build_corpus_idf(sources, targets)
    source_vectors = vectorize_profiles(sources, idf)
    target_vectors = vectorize_profiles(targets, idf)

    ranked = []
    for i, (source, source_vector) in enumerate(zip(sources, source_vectors)):
        for j, (target, target_vector) in enumerate(zip(targets, target_vectors)):
            text_score = cosine_similarity(source_vector, target_vector)
            tag_score = tag_overlap(source.tags, target.tags)
            raw_score = blend_scores(text_score, tag_score)

            result = MatchResult(
                source=source,
                target=target,
                score=display_score(raw_score),
                text_similarity=percentage(text_score),
                tag_overlap=percentage(tag_score),
                explanation=generate_explanation(source, target, text_score),
                raw_score=raw_score,
            )
            ranked.append(((-result.score, i, j), result))

    ranked.sort(key=lambda entry: entry[0])
    logger.debug("Scored %d pairs (%d x %d)", len(ranked), len(sources), len(targets))
    return [result for _, result in ranked]


def filter_matches(results: Iterable[MatchResult], min_score: int = 0,
                   tier: str = "all") -> List[MatchResult]:
    """
    Filter ranked results by minimum display score and tier.

    Tier "top" keeps scores of 80 and above, "good" keeps 65 to 79 and
    "all" keeps everything. Order is preserved. Unknown tiers raise
    ConfigError, a ValueError.
    """
    check_value('matching', 'default_tier', tier)

    kept = []
    for result in results:
        if result.score < min_score:
            continue
        if tier != "all" and result.tier != tier:
            continue
        kept.append(result)
    return kept


class Matcher:
    """Runs matching and applies the configured presentation filters."""

    def __init__(self, min_score: Optional[int] = None, tier: Optional[str] = None):
        if min_score is None or tier is None:
            config = get_config_manager()
            if min_score is None:
                min_score = config.get('matching', 'min_score')
            if tier is None:
                tier = config.get('matching', 'default_tier')
        self.min_score = check_value('matching', 'min_score', min_score)
        self.tier = check_value('matching', 'default_tier', tier)

    def apply(self, results: Iterable[MatchResult]) -> List[MatchResult]:
        """Filter an existing ranking with this matcher's settings."""
        return filter_matches(results, min_score=self.min_score, tier=self.tier)

    def run(self, set_a: Optional[Iterable[Any]], set_b: Optional[Iterable[Any]]) -> List[MatchResult]:
        """Match two collections and return the filtered ranking."""
        return self.apply(match(set_a, set_b))

"""
Addlee - Creator/hotel matching engine with TF-IDF similarity scoring.

A local library and command-line tool that:
- Turns free-text creator and hotel profiles into TF-IDF term vectors
- Scores every creator/hotel pair by text similarity and tag overlap
- Ranks the pairs best-first with a human-readable explanation for each
"""

from .matching import MatchResult, Matcher, filter_matches, match
from .profiles import Profile

__version__ = "0.1.0"
__author__ = "Addlee Project"

__all__ = ["MatchResult", "Matcher", "Profile", "filter_matches", "match"]

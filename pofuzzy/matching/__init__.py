"""Fuzzy matching and merging of translation catalog entries."""

from .similarity import similarity, primary_text
from .matcher import MatchResult, NO_MATCH, FuzzyMatcher, build_matcher
from .merge import MSGSTR_STRATEGIES, merge

__all__ = [
    "similarity",
    "primary_text",
    "MatchResult",
    "NO_MATCH",
    "FuzzyMatcher",
    "build_matcher",
    "MSGSTR_STRATEGIES",
    "merge",
]

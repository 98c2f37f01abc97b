"""Fuzzy matching and merging for translation catalog updates."""

from .models import (
    FUZZY_FLAG,
    RecordKind,
    TranslationKey,
    Translation,
    ContextualTranslation,
    PluralTranslation,
    ContextualPluralTranslation,
    TranslationRecord,
)
from .matching import similarity, build_matcher, merge, MatchResult, FuzzyMatcher

__version__ = "0.1.0"

__all__ = [
    "FUZZY_FLAG",
    "RecordKind",
    "TranslationKey",
    "Translation",
    "ContextualTranslation",
    "PluralTranslation",
    "ContextualPluralTranslation",
    "TranslationRecord",
    "similarity",
    "build_matcher",
    "merge",
    "MatchResult",
    "FuzzyMatcher",
]

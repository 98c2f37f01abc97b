"""Threshold matcher built on top of msgid similarity."""

import logging
import math
import os
from dataclasses import dataclass
from typing import Optional

from ..config import config
from ..models.translation import KeyLike
from .similarity import primary_text, similarity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of comparing two keys: a score when they match, None otherwise."""

    score: Optional[float] = None

    @classmethod
    def match(cls, score: float) -> "MatchResult":
        return cls(score=score)

    @property
    def matched(self) -> bool:
        """Check if the comparison reached the threshold."""
        return self.score is not None

    def __bool__(self) -> bool:
        return self.matched


NO_MATCH = MatchResult()


@dataclass(frozen=True)
class FuzzyMatcher:
    """
    Decides whether two translation keys are a fuzzy match.

    The threshold is inclusive and not range checked: 0.0 or below matches
    everything, anything above 1.0 matches nothing. NaN is rejected.
    """

    threshold: float

    def __post_init__(self):
        if math.isnan(self.threshold):
            raise ValueError("Fuzzy match threshold must be a number, got NaN")

    def evaluate(self, score: float) -> MatchResult:
        """Turn an already computed similarity into a match decision."""
        if score >= self.threshold:
            return MatchResult.match(score)
        return NO_MATCH

    def __call__(self, key1: KeyLike, key2: KeyLike) -> MatchResult:
        result = self.evaluate(similarity(key1, key2))
        if result.matched:
            logger.debug(
                "Fuzzy match %r ~ %r (score %.3f, threshold %s)",
                primary_text(key1), primary_text(key2), result.score, self.threshold,
            )
        return result


def build_matcher(threshold: Optional[float] = None) -> FuzzyMatcher:
    """
    Build a matcher for a fixed threshold.

    Args:
        threshold: Minimum similarity that counts as a match. Defaults to
                   the configured POFUZZY_THRESHOLD.

    Returns:
        A callable taking two keys and returning a MatchResult

    Raises:
        ValueError: If the threshold (given or configured) is not a number
    """
    if threshold is None:
        if math.isnan(config.fuzzy_threshold):
            raise ValueError(
                f"POFUZZY_THRESHOLD is not a number: {os.getenv('POFUZZY_THRESHOLD')!r}"
            )
        threshold = config.fuzzy_threshold
    return FuzzyMatcher(threshold)

"""Jaro similarity between the msgids of two translation keys."""

from typing import List

import regex
from rapidfuzz.distance import Jaro

from ..models.translation import KeyLike, kind_of


def primary_text(key: KeyLike) -> str:
    """
    Get the text used for fuzzy matching: the msgid.

    Context and plural msgids are ignored for every variant, like msgmerge
    does. Two plural entries with similar msgids but very different
    msgid_plurals still match.
    """
    kind_of(key)
    if isinstance(key, str):
        return key
    return key.msgid or ""


def graphemes(text: str) -> List[str]:
    """Split text into user-perceived characters (extended grapheme clusters)."""
    return regex.findall(r"\X", text)


def similarity(key1: KeyLike, key2: KeyLike) -> float:
    """
    Calculate the Jaro similarity of the msgids of two keys.

    Characters are compared as grapheme clusters, so a base letter followed
    by combining accents counts as a single character.

    Args:
        key1: Translation key, record, or bare msgid
        key2: Translation key, record, or bare msgid

    Returns:
        Similarity in [0.0, 1.0]; 1.0 for identical msgids (empty ones
        included), 0.0 when no characters match
    """
    text1 = primary_text(key1)
    text2 = primary_text(key2)
    if text1 == text2:
        return 1.0
    return float(Jaro.normalized_similarity(graphemes(text1), graphemes(text2)))

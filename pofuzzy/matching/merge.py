"""Merging a new catalog entry with its fuzzy-matched predecessor."""

import logging
from typing import Callable, Dict, Tuple, Union

from ..models.translation import (
    RecordKind,
    TranslationRecord,
    copy_record,
    mark_as_fuzzy,
    record_kind,
)

logger = logging.getLogger(__name__)

Msgstr = Union[str, Dict[int, str]]
MsgstrStrategy = Callable[[TranslationRecord, TranslationRecord], Msgstr]


def copy_scalar(new: TranslationRecord, existing: TranslationRecord) -> str:
    return existing.msgstr


def collapse_plural(new: TranslationRecord, existing: TranslationRecord) -> str:
    # Only the first plural form carries over into a singular entry
    return existing.msgstr.get(0, "")


def broadcast_scalar(new: TranslationRecord, existing: TranslationRecord) -> Dict[int, str]:
    # Keeps the plural slots of the new entry, all filled with the old msgstr
    return {index: existing.msgstr for index in new.msgstr}


def copy_plural(new: TranslationRecord, existing: TranslationRecord) -> Dict[int, str]:
    return dict(existing.msgstr)


P, C, PL, CPL = (
    RecordKind.PLAIN,
    RecordKind.CONTEXTUAL,
    RecordKind.PLURAL,
    RecordKind.CONTEXTUAL_PLURAL,
)

# (new kind, existing kind) -> how the msgstr is carried over
MSGSTR_STRATEGIES: Dict[Tuple[RecordKind, RecordKind], MsgstrStrategy] = {
    (P, P): copy_scalar,
    (P, C): copy_scalar,
    (C, P): copy_scalar,
    (C, C): copy_scalar,
    (P, PL): collapse_plural,
    (P, CPL): collapse_plural,
    (C, PL): collapse_plural,
    (C, CPL): collapse_plural,
    (PL, P): broadcast_scalar,
    (PL, C): broadcast_scalar,
    (CPL, P): broadcast_scalar,
    (CPL, C): broadcast_scalar,
    (PL, PL): copy_plural,
    (PL, CPL): copy_plural,
    (CPL, PL): copy_plural,
    (CPL, CPL): copy_plural,
}


def merge(new: TranslationRecord, existing: TranslationRecord) -> TranslationRecord:
    """
    Merge a new entry with the existing entry it fuzzy-matched.

    Everything comes from ``new`` except the msgstr and the translator
    comments, which come from ``existing``. The result keeps the variant of
    ``new`` and is flagged fuzzy. No threshold check happens here.

    Args:
        new: Entry from the regenerated catalog
        existing: Previously translated entry

    Returns:
        A new record; neither input is modified
    """
    strategy = MSGSTR_STRATEGIES[(record_kind(new), record_kind(existing))]
    logger.debug(
        "Merging %r into %s entry %r via %s",
        existing.msgid, new.kind.value, new.msgid, strategy.__name__,
    )
    merged = copy_record(
        new,
        comments=list(existing.comments),
        msgstr=strategy(new, existing),
    )
    return mark_as_fuzzy(merged)

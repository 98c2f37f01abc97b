"""Data models for translation catalog entries."""

from .translation import (
    FUZZY_FLAG,
    RecordKind,
    TranslationKey,
    Translation,
    ContextualTranslation,
    PluralTranslation,
    ContextualPluralTranslation,
    TranslationRecord,
    KeyLike,
    kind_of,
    record_kind,
    record_key,
    copy_record,
    mark_as_fuzzy,
)

__all__ = [
    "FUZZY_FLAG",
    "RecordKind",
    "TranslationKey",
    "Translation",
    "ContextualTranslation",
    "PluralTranslation",
    "ContextualPluralTranslation",
    "TranslationRecord",
    "KeyLike",
    "kind_of",
    "record_kind",
    "record_key",
    "copy_record",
    "mark_as_fuzzy",
]

"""Data models for parsed translation catalog (PO) entries."""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Set, Union

FUZZY_FLAG = "fuzzy"


class RecordKind(str, Enum):
    """Structural variant of a translation record."""
    PLAIN = "plain"
    CONTEXTUAL = "contextual"
    PLURAL = "plural"
    CONTEXTUAL_PLURAL = "contextual_plural"

    @property
    def is_plural(self) -> bool:
        return self in (RecordKind.PLURAL, RecordKind.CONTEXTUAL_PLURAL)

    @property
    def has_context(self) -> bool:
        return self in (RecordKind.CONTEXTUAL, RecordKind.CONTEXTUAL_PLURAL)


@dataclass(frozen=True)
class TranslationKey:
    """
    Identifying part of a translation record.

    Only ``msgid`` takes part in similarity scoring; ``msgctxt`` and
    ``msgid_plural`` are kept so a key still tells the variants apart.
    """

    kind: RecordKind
    msgid: str
    msgid_plural: Optional[str] = None
    msgctxt: Optional[str] = None

    def __post_init__(self):
        if (self.msgctxt is not None) != self.kind.has_context:
            raise ValueError(f"A {self.kind.value} key cannot have msgctxt={self.msgctxt!r}")
        if (self.msgid_plural is not None) != self.kind.is_plural:
            raise ValueError(
                f"A {self.kind.value} key cannot have msgid_plural={self.msgid_plural!r}"
            )

    @classmethod
    def plain(cls, msgid: str) -> "TranslationKey":
        return cls(RecordKind.PLAIN, msgid)

    @classmethod
    def contextual(cls, msgctxt: str, msgid: str) -> "TranslationKey":
        return cls(RecordKind.CONTEXTUAL, msgid, msgctxt=msgctxt)

    @classmethod
    def plural(cls, msgid: str, msgid_plural: str) -> "TranslationKey":
        return cls(RecordKind.PLURAL, msgid, msgid_plural=msgid_plural)

    @classmethod
    def contextual_plural(
        cls, msgctxt: str, msgid: str, msgid_plural: str
    ) -> "TranslationKey":
        return cls(RecordKind.CONTEXTUAL_PLURAL, msgid, msgid_plural=msgid_plural, msgctxt=msgctxt)


class _RecordMixin:
    """Behaviour shared by every record variant."""

    kind: ClassVar[RecordKind]

    @property
    def is_fuzzy(self) -> bool:
        """Check if the record is flagged as an approximate translation."""
        return FUZZY_FLAG in self.flags

    def key(self) -> TranslationKey:
        """Get the identifying key of this record."""
        return TranslationKey(
            kind=self.kind,
            msgid=self.msgid,
            msgid_plural=getattr(self, "msgid_plural", None),
            msgctxt=getattr(self, "msgctxt", None),
        )


@dataclass
class Translation(_RecordMixin):
    """A plain entry: msgid and a single msgstr."""

    msgid: str
    msgstr: str = ""
    comments: List[str] = field(default_factory=list)
    extracted_comments: List[str] = field(default_factory=list)
    references: List[str] = field(default_factory=list)
    flags: Set[str] = field(default_factory=set)

    kind: ClassVar[RecordKind] = RecordKind.PLAIN


@dataclass
class ContextualTranslation(Translation):
    """An entry disambiguated by a msgctxt."""

    msgctxt: str = ""

    kind: ClassVar[RecordKind] = RecordKind.CONTEXTUAL


@dataclass
class PluralTranslation(_RecordMixin):
    """An entry with plural forms: msgstr maps plural index to text."""

    msgid: str
    msgid_plural: str = ""
    msgstr: Dict[int, str] = field(default_factory=dict)
    comments: List[str] = field(default_factory=list)
    extracted_comments: List[str] = field(default_factory=list)
    references: List[str] = field(default_factory=list)
    flags: Set[str] = field(default_factory=set)

    kind: ClassVar[RecordKind] = RecordKind.PLURAL


@dataclass
class ContextualPluralTranslation(PluralTranslation):
    """A plural entry disambiguated by a msgctxt."""

    msgctxt: str = ""

    kind: ClassVar[RecordKind] = RecordKind.CONTEXTUAL_PLURAL


TranslationRecord = Union[
    Translation,
    ContextualTranslation,
    PluralTranslation,
    ContextualPluralTranslation,
]

KeyLike = Union[TranslationKey, TranslationRecord, str]


def kind_of(obj: KeyLike) -> RecordKind:
    """
    Get the structural variant of a key, record or bare msgid.

    Raises:
        TypeError: If obj is none of those
    """
    if isinstance(obj, str):
        return RecordKind.PLAIN
    if isinstance(obj, (TranslationKey, _RecordMixin)):
        return obj.kind
    raise TypeError(f"Unsupported translation key or record: {type(obj).__name__}")


def record_kind(record: TranslationRecord) -> RecordKind:
    """
    Get the structural variant of a record.

    Raises:
        TypeError: If record is not one of the four record classes
    """
    if not isinstance(record, _RecordMixin):
        raise TypeError(f"Unsupported translation record: {type(record).__name__}")
    return record.kind


def record_key(record: TranslationRecord) -> TranslationKey:
    """Get the identifying key of a record."""
    record_kind(record)
    return record.key()


def copy_record(record: TranslationRecord, **changes) -> TranslationRecord:
    """
    Build an independent copy of a record, optionally replacing fields.

    Lists, sets and dicts are copied so the result never aliases the input.
    """
    values = {
        "comments": list(record.comments),
        "extracted_comments": list(record.extracted_comments),
        "references": list(record.references),
        "flags": set(record.flags),
        "msgstr": dict(record.msgstr) if isinstance(record.msgstr, dict) else record.msgstr,
    }
    values.update(changes)
    return dataclasses.replace(record, **values)


def mark_as_fuzzy(record: TranslationRecord) -> TranslationRecord:
    """Return a copy of the record with the fuzzy flag added."""
    return copy_record(record, flags=set(record.flags) | {FUZZY_FLAG})

"""
Tests for merging a new entry with its fuzzy-matched predecessor.
"""

import itertools

import pytest

from pofuzzy.matching import MSGSTR_STRATEGIES, merge
from pofuzzy.models import (
    FUZZY_FLAG,
    ContextualPluralTranslation,
    ContextualTranslation,
    PluralTranslation,
    RecordKind,
    Translation,
)


def new_record(kind):
    """A freshly extracted entry of the given kind, untranslated."""
    common = dict(
        comments=["# new comment"],
        extracted_comments=["#. extracted"],
        references=["lib/app.py:12"],
        flags={"python-format"},
    )
    if kind is RecordKind.PLAIN:
        return Translation(msgid="foo", **common)
    if kind is RecordKind.CONTEXTUAL:
        return ContextualTranslation(msgctxt="ctxt1", msgid="foo", **common)
    if kind is RecordKind.PLURAL:
        return PluralTranslation(
            msgid="foo", msgid_plural="bar", msgstr={0: "", 1: ""}, **common
        )
    return ContextualPluralTranslation(
        msgctxt="ctxt1", msgid="foo", msgid_plural="bar", msgstr={0: "", 1: ""}, **common
    )


def existing_record(kind):
    """A previously translated entry of the given kind."""
    common = dict(comments=["# translator note"], flags={"c-format"})
    if kind is RecordKind.PLAIN:
        return Translation(msgid="foos", msgstr="bar", **common)
    if kind is RecordKind.CONTEXTUAL:
        return ContextualTranslation(msgctxt="ctxt2", msgid="foos", msgstr="bar", **common)
    if kind is RecordKind.PLURAL:
        return PluralTranslation(
            msgid="foos", msgid_plural="baz", msgstr={0: "a", 1: "b"}, **common
        )
    return ContextualPluralTranslation(
        msgctxt="ctxt2", msgid="foos", msgid_plural="baz", msgstr={0: "a", 1: "b"}, **common
    )


ALL_PAIRS = list(itertools.product(RecordKind, RecordKind))


def _identity(record):
    return (
        type(record),
        getattr(record, "msgctxt", None),
        record.msgid,
        getattr(record, "msgid_plural", None),
    )


class TestDispatchTable:
    """Test the msgstr strategy table is total."""

    def test_covers_every_pair(self):
        assert set(MSGSTR_STRATEGIES) == set(ALL_PAIRS)
        assert len(MSGSTR_STRATEGIES) == 16


class TestMergeInvariants:
    """Properties that hold for every combination of variants."""

    @pytest.mark.parametrize("new_kind,existing_kind", ALL_PAIRS)
    def test_keeps_identity_of_new(self, new_kind, existing_kind):
        new = new_record(new_kind)
        merged = merge(new, existing_record(existing_kind))

        assert merged.kind is new_kind
        assert _identity(merged) == _identity(new)
        assert merged.extracted_comments == new.extracted_comments
        assert merged.references == new.references

    @pytest.mark.parametrize("new_kind,existing_kind", ALL_PAIRS)
    def test_comments_and_flags(self, new_kind, existing_kind):
        new = new_record(new_kind)
        existing = existing_record(existing_kind)
        merged = merge(new, existing)

        assert merged.comments == existing.comments
        assert merged.flags == new.flags | {FUZZY_FLAG}
        assert merged.is_fuzzy

    @pytest.mark.parametrize("new_kind,existing_kind", ALL_PAIRS)
    def test_inputs_untouched(self, new_kind, existing_kind):
        new = new_record(new_kind)
        existing = existing_record(existing_kind)
        merged = merge(new, existing)

        assert new == new_record(new_kind)
        assert existing == existing_record(existing_kind)

        merged.comments.append("# later edit")
        merged.flags.add("no-wrap")
        assert existing.comments == ["# translator note"]
        assert FUZZY_FLAG not in new.flags
        if isinstance(merged.msgstr, dict):
            merged.msgstr[0] = "changed"
            assert existing == existing_record(existing_kind)


class TestMergeMsgstr:
    """Test how the msgstr is carried over."""

    @pytest.mark.parametrize("new_kind", [RecordKind.PLAIN, RecordKind.CONTEXTUAL])
    @pytest.mark.parametrize("existing_kind", [RecordKind.PLAIN, RecordKind.CONTEXTUAL])
    def test_singular_from_singular(self, new_kind, existing_kind):
        merged = merge(new_record(new_kind), existing_record(existing_kind))
        assert merged.msgstr == "bar"

    @pytest.mark.parametrize("new_kind", [RecordKind.PLAIN, RecordKind.CONTEXTUAL])
    @pytest.mark.parametrize("existing_kind", [RecordKind.PLURAL, RecordKind.CONTEXTUAL_PLURAL])
    def test_singular_from_plural_takes_first_form(self, new_kind, existing_kind):
        merged = merge(new_record(new_kind), existing_record(existing_kind))
        assert merged.msgstr == "a"

    @pytest.mark.parametrize("new_kind", [RecordKind.PLURAL, RecordKind.CONTEXTUAL_PLURAL])
    @pytest.mark.parametrize("existing_kind", [RecordKind.PLAIN, RecordKind.CONTEXTUAL])
    def test_plural_from_singular_broadcasts(self, new_kind, existing_kind):
        merged = merge(new_record(new_kind), existing_record(existing_kind))
        assert merged.msgstr == {0: "bar", 1: "bar"}

    @pytest.mark.parametrize("new_kind", [RecordKind.PLURAL, RecordKind.CONTEXTUAL_PLURAL])
    @pytest.mark.parametrize("existing_kind", [RecordKind.PLURAL, RecordKind.CONTEXTUAL_PLURAL])
    def test_plural_from_plural_copies_forms(self, new_kind, existing_kind):
        merged = merge(new_record(new_kind), existing_record(existing_kind))
        assert merged.msgstr == {0: "a", 1: "b"}

    def test_broadcast_uses_index_set_of_new(self):
        new = PluralTranslation(msgid="day", msgid_plural="days", msgstr={0: "x", 1: "y", 2: "z"})
        merged = merge(new, Translation(msgid="a day", msgstr="zi"))
        assert merged.msgstr == {0: "zi", 1: "zi", 2: "zi"}

    def test_plural_copy_ignores_index_set_of_new(self):
        new = PluralTranslation(msgid="day", msgid_plural="days", msgstr={0: "", 1: "", 2: ""})
        existing = PluralTranslation(msgid="a day", msgid_plural="days", msgstr={0: "Tag", 1: "Tage"})
        assert merge(new, existing).msgstr == {0: "Tag", 1: "Tage"}

    def test_plural_without_forms_collapses_to_empty(self):
        merged = merge(Translation(msgid="foo"), PluralTranslation(msgid="foos"))
        assert merged.msgstr == ""

    def test_already_fuzzy_stays_fuzzy(self):
        new = Translation(msgid="foo", flags={FUZZY_FLAG})
        merged = merge(new, Translation(msgid="foos", msgstr="bar"))
        assert merged.flags == {FUZZY_FLAG}


class TestMergeErrors:
    """Test merge rejects objects that are not records."""

    def test_rejects_non_record(self):
        with pytest.raises(TypeError, match="dict"):
            merge(Translation(msgid="foo"), {"msgid": "foo", "msgstr": "bar"})

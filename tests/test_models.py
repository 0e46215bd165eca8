#!/usr/bin/env python3
"""Tests for the localization data model."""

from locedit.models import Localization, LocalizationGroup, LocalizationString


def _group():
    en = Localization("en", [LocalizationString("a", "A"), LocalizationString("b", "B")], "/p/en.lproj/L.strings")
    fr = Localization("fr", [LocalizationString("a", "À")], "/p/fr.lproj/L.strings")
    return LocalizationGroup("L.strings", [en, fr], "/p/L.strings")


def test_labels():
    """Localizations display as upper-cased language, groups as their name."""
    group = _group()

    assert str(group.localizations[0]) == "EN"
    assert str(group) == "L.strings"
    assert str(LocalizationString("k", "v")) == "k = v"


def test_strings_sort_by_key():
    strings = [LocalizationString("b", "1"), LocalizationString("B", "2"), LocalizationString("a", "3")]

    assert [s.key for s in sorted(strings)] == ["B", "a", "b"]


def test_groups_sort_by_name():
    groups = [LocalizationGroup("b.strings", path="/x/b.strings"), LocalizationGroup("a.strings", path="/y/a.strings")]

    assert [g.name for g in sorted(groups)] == ["a.strings", "b.strings"]


def test_value_lookup():
    en = _group().localizations[0]

    assert en.value_for("a") == "A"
    assert en.value_for("missing") is None
    assert en.keys() == ["a", "b"]


def test_group_table_marks_missing_values():
    table = _group().table()

    assert table == {
        "a": {"en": "A", "fr": "À"},
        "b": {"en": "B", "fr": None},
    }


def test_with_translations_keeps_identity():
    en = _group().localizations[0]

    updated = en.with_translations([LocalizationString("c", "C")])

    assert updated.path == en.path
    assert updated.language == "en"
    assert en.keys() == ["a", "b"]

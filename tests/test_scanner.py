#!/usr/bin/env python3
"""
Tests for the directory scanner.

Covers grouping by logical path, language detection, ignored directories
and the silent handling of unreadable roots and broken files.
"""

from locedit.config import ScanConfig
from locedit.errors import ParseFailure, ScanTargetUnavailable
from locedit.scanner import find_localization_files, language_for_file, logical_path, scan


def test_groups_languages_by_logical_path(make_file, tmp_path):
    """en.lproj and fr.lproj copies of a file form one group."""
    make_file("proj/en.lproj/Localizable.strings", '"hello" = "Hello";\n')
    make_file("proj/fr.lproj/Localizable.strings", '"hello" = "Bonjour";\n')

    result = scan(str(tmp_path / "proj"))

    assert result.ok
    assert len(result.groups) == 1
    group = result.groups[0]
    assert group.name == "Localizable.strings"
    assert group.path == str(tmp_path / "proj" / "Localizable.strings")
    assert group.languages() == ["en", "fr"]
    assert group.localization_for("fr").value_for("hello") == "Bonjour"


def test_localization_paths_point_to_language_files(make_file, tmp_path):
    en = make_file("proj/en.lproj/Localizable.strings")

    group = scan(str(tmp_path / "proj")).groups[0]

    assert group.localizations[0].path == str(en)


def test_pods_directory_is_excluded(make_file, tmp_path):
    """Files below a Pods directory are skipped, other directories are kept."""
    make_file("proj/Pods/en.lproj/Localizable.strings")
    make_file("proj/Feature/en.lproj/Localizable.strings")

    groups = scan(str(tmp_path / "proj")).groups

    assert len(groups) == 1
    assert groups[0].path.endswith("proj/Feature/Localizable.strings")


def test_all_default_ignored_directories(make_file, tmp_path):
    make_file("proj/Carthage/Checkouts/en.lproj/A.strings")
    make_file("proj/build/en.lproj/B.strings")
    make_file("proj/Vendor.framework/en.lproj/C.strings")
    make_file("proj/Sub/Pods/D.strings")
    make_file("proj/App/en.lproj/E.strings")

    groups = scan(str(tmp_path / "proj")).groups

    assert [group.name for group in groups] == ["E.strings"]


def test_ignored_names_match_as_substrings(make_file, tmp_path):
    """Matching is substring based on '<name>/', so MyPods/ is excluded too."""
    make_file("proj/MyPods/en.lproj/A.strings")
    make_file("proj/Podspec/en.lproj/B.strings")

    groups = scan(str(tmp_path / "proj")).groups

    assert [group.name for group in groups] == ["B.strings"]


def test_custom_ignored_directories(make_file, tmp_path):
    make_file("proj/Vendor/en.lproj/A.strings")
    make_file("proj/Pods/en.lproj/B.strings")

    config = ScanConfig(ignored_directories=["Vendor"])
    groups = scan(str(tmp_path / "proj"), config).groups

    assert [group.name for group in groups] == ["B.strings"]


def test_only_strings_files_are_collected(make_file, tmp_path):
    make_file("proj/en.lproj/Localizable.strings")
    make_file("proj/en.lproj/Localizable.stringsdict", "<plist/>")
    make_file("proj/en.lproj/notes.txt", "text")

    files = find_localization_files(str(tmp_path / "proj"), ScanConfig())

    assert files == [str(tmp_path / "proj" / "en.lproj" / "Localizable.strings")]


def test_groups_sorted_by_name(project):
    groups = scan(str(project)).groups

    assert [group.name for group in groups] == ["InfoPlist.strings", "Localizable.strings"]


def test_same_file_name_in_different_folders_gives_two_groups(make_file, tmp_path):
    make_file("proj/A/en.lproj/Localizable.strings")
    make_file("proj/B/en.lproj/Localizable.strings")

    groups = scan(str(tmp_path / "proj")).groups

    assert [group.name for group in groups] == ["Localizable.strings", "Localizable.strings"]
    assert groups[0].path.endswith("A/Localizable.strings")
    assert groups[1].path.endswith("B/Localizable.strings")


def test_missing_root_returns_empty(tmp_path):
    """A missing root yields no groups and a ScanTargetUnavailable error."""
    result = scan(str(tmp_path / "missing"))

    assert result.groups == []
    assert len(result.errors) == 1
    assert isinstance(result.errors[0], ScanTargetUnavailable)


def test_file_as_root_returns_empty(make_file):
    path = make_file("en.lproj/Localizable.strings")

    result = scan(str(path))

    assert result.groups == []
    assert isinstance(result.errors[0], ScanTargetUnavailable)


def test_broken_file_keeps_empty_localization(make_file, tmp_path):
    """A file that fails to parse still appears, with no strings."""
    make_file("proj/en.lproj/Localizable.strings", '"ok" = "fine";\n')
    make_file("proj/de.lproj/Localizable.strings", 'this is not a strings file')

    result = scan(str(tmp_path / "proj"))

    group = result.groups[0]
    assert group.languages() == ["de", "en"]
    assert group.localization_for("de").translations == []
    assert len(result.errors) == 1
    assert isinstance(result.errors[0], ParseFailure)


def test_logical_path_removes_bundle_directories():
    config = ScanConfig()

    assert logical_path("/proj/en.lproj/Localizable.strings", config) == "/proj/Localizable.strings"
    assert logical_path("/proj/Base.lproj/Sub/x.lproj/Main.strings", config) == "/proj/Sub/Main.strings"


def test_language_for_file():
    config = ScanConfig()

    assert language_for_file("/proj/pt-BR.lproj/Localizable.strings", config) == "pt-BR"
    assert language_for_file("/proj/Resources/Localizable.strings", config) == "Resources"

#!/usr/bin/env python3
"""
Tests for the resource file naming convention:
1. Locale derivation from file names
2. Group derivation from paths below the base directory
3. Target file names for export, including consecutive-dot groups
"""

from pathlib import Path

import pytest

from jsonres.naming import parse_locale, parse_resource_path, resource_file_name, resource_file_path


@pytest.mark.parametrize("filename,expected", [
    ("strings.json", ""),
    ("strings.de-DE.json", "de-DE"),
    ("greeting.fr.json", "fr"),
    ("folder/sub/greeting.fr.json", "fr"),
])
def test_parse_locale(filename, expected):
    """Test 1: Locale is the extension left after stripping .json."""
    assert parse_locale(filename) == expected


def test_nested_path_keeps_subfolders(tmp_path):
    """Test 2: folder/sub/greeting.fr.json -> group folder/sub/greeting, locale fr."""
    path = tmp_path / "folder" / "sub" / "greeting.fr.json"
    assert parse_resource_path(path, tmp_path) == ("folder/sub/greeting", "fr")


def test_invariant_file_at_root(tmp_path):
    """Test 3: greeting.json -> group greeting, invariant locale."""
    assert parse_resource_path(tmp_path / "greeting.json", tmp_path) == ("greeting", "")


def test_invariant_file_name_has_no_locale_segment():
    """Test 4: Invariant files are group.json, never group..json."""
    assert resource_file_name("app", "") == "app.json"
    assert resource_file_name("app", "de") == "app.de.json"
    assert resource_file_name("sub/app", "pt-BR") == "sub/app.pt-BR.json"


def test_consecutive_dots_in_group_are_preserved():
    """Test 5: A group with '..' is not collapsed to a single dot."""
    assert resource_file_name("odd..name", "") == "odd..name.json"
    assert resource_file_name("odd..name", "de") == "odd..name.de.json"
    # a group ending in a dot keeps it as well
    assert resource_file_name("trailing.", "de") == "trailing..de.json"


def test_resource_file_path_joins_base(tmp_path):
    """Test 6: Target path is joined below the base directory."""
    assert resource_file_path(tmp_path, "sub/app", "de") == tmp_path / "sub" / "app.de.json"
    assert isinstance(resource_file_path(str(tmp_path), "app", ""), Path)

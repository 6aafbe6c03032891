#!/usr/bin/env python3
"""
Tests for configuration and base directory resolution:
1. Absolute and relative storage locations
2. Blank storage locations rejected at set time
3. YAML config files
"""

import os

import pytest

from jsonres import InvalidConfiguration, ProviderConfig, load_config, resolve_base_directory


def test_absolute_location_is_kept(tmp_path):
    """Test 1: Absolute locations ignore the solution path."""
    location = str(tmp_path / "res")
    assert resolve_base_directory(location, "/somewhere/else") == tmp_path / "res"


def test_absolute_location_is_normalized(tmp_path):
    """Test 2: Absolute locations are normalized."""
    location = os.path.join(str(tmp_path), "a", "..", "res")
    assert resolve_base_directory(location) == tmp_path / "res"


def test_relative_location_uses_solution_path(tmp_path):
    """Test 3: Relative locations resolve against the solution path."""
    solution = tmp_path / "solution"
    assert resolve_base_directory("../locales", str(solution)) == tmp_path / "locales"
    assert resolve_base_directory("locales", solution) == solution / "locales"


def test_relative_location_without_solution_uses_cwd(tmp_path, monkeypatch):
    """Test 4: Without a solution path the working directory is the root."""
    monkeypatch.chdir(tmp_path)
    assert resolve_base_directory("locales") == tmp_path.resolve() / "locales"


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
def test_blank_location_rejected(value):
    """Test 5: Blank storage locations raise on construction."""
    with pytest.raises(InvalidConfiguration):
        ProviderConfig(storage_location=value)


def test_blank_location_rejected_on_set():
    """Test 6: Assigning a blank storage location raises immediately."""
    config = ProviderConfig(storage_location="locales")
    with pytest.raises(InvalidConfiguration):
        config.storage_location = " "
    assert config.storage_location == "locales"


def test_load_config(tmp_path):
    """Test 7: YAML config with relative solution path."""
    config_file = tmp_path / "conf" / "jsonres.yml"
    config_file.parent.mkdir()
    config_file.write_text(
        "storage_location: locales\nsolution_path: ..\nproject_name: webapp\n",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.project_name == "webapp"
    assert config.base_directory == tmp_path.resolve() / "locales"


def test_load_config_defaults_solution_to_config_dir(tmp_path):
    """Test 8: Without solution_path, the config file directory is the root."""
    config_file = tmp_path / "jsonres.yml"
    config_file.write_text("storage_location: res\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.base_directory == tmp_path.resolve() / "res"
    assert config.project_name == ""


def test_load_config_override_location(tmp_path):
    """Test 9: An explicit storage location wins over the file."""
    config_file = tmp_path / "jsonres.yml"
    config_file.write_text("project_name: webapp\n", encoding="utf-8")

    config = load_config(config_file, storage_location="other")

    assert config.base_directory == tmp_path.resolve() / "other"


@pytest.mark.parametrize("content", ["storage_location: ''\n", "- a\n- b\n", "key: [unclosed\n"])
def test_load_config_invalid(tmp_path, content):
    """Test 10: Blank location, non-mapping and broken YAML are rejected."""
    config_file = tmp_path / "jsonres.yml"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(InvalidConfiguration):
        load_config(config_file)


def test_load_config_missing_file(tmp_path):
    """Test 11: A missing config file is a configuration error."""
    with pytest.raises(InvalidConfiguration):
        load_config(tmp_path / "nope.yml")

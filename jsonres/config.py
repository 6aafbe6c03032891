#!/usr/bin/env python3
"""
Provider configuration and base directory resolution.

The host supplies a storage location (absolute, or relative to the
solution/root directory) and the solution path before any operation.
A YAML file can carry the same settings for the command line host:

```yaml
storage_location: locales
solution_path: ..
project_name: webapp
```
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .errors import InvalidConfiguration


def resolve_base_directory(
    storage_location: str,
    solution_path: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Turn the configured storage location into an absolute directory path.

    Args:
        storage_location: Absolute path, or a path relative to solution_path
        solution_path: Root directory for relative locations (default: cwd)

    Returns:
        Normalized absolute Path
    """
    if os.path.isabs(storage_location):
        return Path(os.path.normpath(storage_location))

    root = solution_path if solution_path else os.getcwd()
    return Path(os.path.abspath(os.path.join(root, storage_location)))


def _check_storage_location(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidConfiguration(f"Storage location must be a non-blank path, got {value!r}")
    return value


@dataclass
class ProviderConfig:
    """
    Settings a host hands to the provider.

    Attributes:
        storage_location: Base directory of the resource files
        solution_path: Root for a relative storage_location
        project_name: Project identifier reported in result items
    """
    storage_location: str
    solution_path: Optional[str] = None
    project_name: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        # Blank locations are rejected when set (including __init__), not when resolved
        if name == "storage_location":
            _check_storage_location(value)
        super().__setattr__(name, value)

    @property
    def base_directory(self) -> Path:
        return resolve_base_directory(self.storage_location, self.solution_path)


def load_config(
    config_file: Union[str, Path],
    storage_location: Optional[str] = None,
) -> ProviderConfig:
    """
    Load provider settings from a YAML file.

    storage_location, when given, takes precedence over the file value.

    A relative solution_path is taken relative to the config file's directory;
    without one, the config file's directory is the solution path.

    Raises:
        InvalidConfiguration: File unreadable, not a mapping, or location blank
    """
    config_path = Path(config_file)
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InvalidConfiguration(f"Cannot read config file {config_path}: {e}")
    except yaml.YAMLError as e:
        raise InvalidConfiguration(f"Invalid YAML in {config_path}: {e}")

    if not isinstance(data, dict):
        raise InvalidConfiguration(f"Config file {config_path} must contain a mapping")

    config_dir = config_path.resolve().parent
    solution_path = data.get("solution_path")
    if solution_path:
        solution_path = os.path.join(config_dir, str(solution_path))
    else:
        solution_path = str(config_dir)

    return ProviderConfig(
        storage_location=storage_location or data.get("storage_location"),
        solution_path=solution_path,
        project_name=str(data.get("project_name") or ""),
    )

#!/usr/bin/env python3
"""
File naming convention for JSON resource files.

Files are named <group>.<locale>.json. Invariant strings live in a file with
no locale segment at all (<group>.json). The group keeps the subfolder path
relative to the base directory, always "/"-separated:

    base/strings.json                -> ("strings", "")
    base/strings.de-DE.json          -> ("strings", "de-DE")
    base/folder/sub/greeting.fr.json -> ("folder/sub/greeting", "fr")
"""

import os
from pathlib import Path, PurePath
from typing import Union

from .resources import INVARIANT_LOCALE

RESOURCE_EXTENSION = ".json"
RESOURCE_GLOB = f"*{RESOURCE_EXTENSION}"


def _split_name(filename: str) -> tuple[str, str]:
    """Split "strings.de-DE.json" into ("strings", "de-DE")."""
    stem = filename
    if stem.endswith(RESOURCE_EXTENSION):
        stem = stem[:-len(RESOURCE_EXTENSION)]
    plain_name, locale_ext = os.path.splitext(stem)
    return plain_name, locale_ext.lstrip(".")


def parse_locale(filename: Union[str, PurePath]) -> str:
    """
    Derive the locale from a resource file name.

    The locale is the extension left over after stripping ".json".
    "strings.json" has none and maps to the invariant locale.
    """
    return _split_name(PurePath(filename).name)[1]


def parse_resource_path(
    path: Union[str, Path],
    base_directory: Union[str, Path],
) -> tuple[str, str]:
    """
    Split a resource file path into (group, locale).

    Args:
        path: Path of a .json file somewhere below base_directory
        base_directory: Root of the resource tree

    Returns:
        Tuple of group identifier and locale code ("" for invariant)
    """
    relative = Path(path).relative_to(base_directory)
    plain_name, locale = _split_name(relative.name)

    parts = [p for p in relative.parent.parts if p not in ("", ".")]
    parts.append(plain_name)
    return "/".join(parts), locale


def resource_file_name(group: str, locale: str) -> str:
    """
    Build the relative file name for a (group, locale) pair.

    The invariant locale has no locale segment. Group names are used as-is,
    so a group containing consecutive dots is never collapsed.
    """
    if locale == INVARIANT_LOCALE:
        return f"{group}{RESOURCE_EXTENSION}"
    return f"{group}.{locale}{RESOURCE_EXTENSION}"


def resource_file_path(base_directory: Union[str, Path], group: str, locale: str) -> Path:
    """Absolute target path of a (group, locale) pair below base_directory."""
    return Path(base_directory) / resource_file_name(group, locale)

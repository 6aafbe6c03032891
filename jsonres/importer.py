#!/usr/bin/env python3
"""
Import: read a tree of per-locale JSON files into resource records.

Every *.json file below the base directory contributes its keys to the
resource records of its group. Records are returned whether or not they
carry invariant text; dropping invalid records is up to the caller
(see resources.valid_only).
"""

import logging
from pathlib import Path
from typing import Union

from .errors import MalformedResourceFile, ResourceDirectoryNotFound, ResourceFileUnreadable
from .json_store import load_string_map
from .naming import RESOURCE_GLOB, parse_resource_path
from .resources import ResourceString

logger = logging.getLogger(__name__)


def find_resource_files(base_directory: Union[str, Path]) -> list[Path]:
    """All resource files below base_directory, recursively, in stable order."""
    base = Path(base_directory)
    return sorted(p for p in base.rglob(RESOURCE_GLOB) if p.is_file())


def import_resource_strings(base_directory: Union[str, Path]) -> list[ResourceString]:
    """
    Read all resource files below base_directory.

    Args:
        base_directory: Absolute root of the resource tree

    Returns:
        One ResourceString per (group, key), in first-seen order

    Raises:
        ResourceDirectoryNotFound: base_directory does not exist
        MalformedResourceFile: Any file is not a flat JSON string map.
            The whole import is aborted.
        ResourceFileUnreadable: Any file cannot be read from disk
    """
    base = Path(base_directory)
    if not base.is_dir():
        raise ResourceDirectoryNotFound(base)

    resources: dict[tuple[str, str], ResourceString] = {}

    for file_path in find_resource_files(base):
        group, locale = parse_resource_path(file_path, base)

        try:
            strings = load_string_map(file_path)
        except OSError as e:
            raise ResourceFileUnreadable(file_path, str(e)) from e
        except ValueError as e:
            raise MalformedResourceFile(file_path, str(e)) from e

        for key, text in strings.items():
            resource = resources.get((group, key))
            if resource is None:
                resource = ResourceString(name=key, storage_location=group)
                resources[(group, key)] = resource
            resource.set_locale_text(locale, text)

    logger.info("Imported %d resource strings from %s", len(resources), base)
    return list(resources.values())

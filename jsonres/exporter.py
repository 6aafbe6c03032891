#!/usr/bin/env python3
"""
Export: write resource records back into per-locale JSON files.

Existing files are merged, not replaced: each target file is loaded once per
run, the exported keys are overlaid on its content, and the full map is
written back. Keys that are not part of the export stay untouched.

Failures are reported per file through OperationResultItem. A file that
failed to load is skipped for the rest of the run, so each broken file is
reported exactly once.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from .json_store import load_string_map, write_string_map
from .naming import resource_file_path
from .resources import OperationResult, OperationResultItem, ResourceString

logger = logging.getLogger(__name__)

ResultCallback = Callable[[OperationResultItem], None]


def _error_message(exc: BaseException) -> str:
    """Message of the innermost cause, as the host shows it to the user."""
    while exc.__cause__ is not None:
        exc = exc.__cause__
    return str(exc)


def export_resource_strings(
    base_directory: Union[str, Path],
    resource_strings: Iterable[ResourceString],
    project_name: str = "",
    result_callback: Optional[ResultCallback] = None,
) -> list[OperationResultItem]:
    """
    Write resource strings into the resource tree below base_directory.

    Args:
        base_directory: Absolute root of the resource tree
        resource_strings: Records to persist, each with any number of locales
        project_name: Project identifier copied into every result item
        result_callback: Called once per result item, in order

    Returns:
        All result items, in the order they were reported
    """
    base = Path(base_directory)
    results: list[OperationResultItem] = []

    def report(item: OperationResultItem) -> None:
        results.append(item)
        if result_callback is not None:
            result_callback(item)

    # path -> full file content plus overlays
    file_cache: dict[Path, dict[str, str]] = {}
    # paths that failed to load; never retried within this run
    error_paths: set[Path] = set()

    for resource in resource_strings:
        for locale in resource.get_locales():
            path = resource_file_path(base, resource.storage_location, locale)

            if path in error_paths:
                continue

            if path not in file_cache:
                if path.exists():
                    try:
                        file_cache[path] = load_string_map(path)
                    except (OSError, ValueError) as e:
                        logger.warning("Cannot load %s: %s", path, e)
                        report(OperationResultItem(
                            path=str(path),
                            project_name=project_name,
                            result=OperationResult.ERROR,
                            message=_error_message(e),
                        ))
                        error_paths.add(path)
                        continue
                else:
                    file_cache[path] = {}

            file_cache[path][resource.name] = resource.get_locale_text(locale)

    for path, strings in file_cache.items():
        item = OperationResultItem(path=str(path), project_name=project_name)
        try:
            write_string_map(path, strings)
        except OSError as e:
            logger.warning("Cannot write %s: %s", path, e)
            item.result = OperationResult.ERROR
            item.message = _error_message(e)
        report(item)

    written = sum(1 for r in results if r.ok)
    logger.info("Exported %d resource files to %s (%d errors)", written, base, len(results) - written)
    return results

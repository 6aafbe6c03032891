#!/usr/bin/env python3
"""
JSON Resources Provider - host-facing facade.

The provider reads all JSON files in the base directory and treats them as
files containing string resources. Files are named <filename>.[locale].json.
Invariant strings are contained in a file with no locale in its name
(e.g. strings.json); files with a locale (e.g. strings.de-DE.json) are
translations. Strings not present in the invariant file are not valid
resources and are expected to be dropped by the host.

Relative storage locations are resolved against the solution path.
Subfolders of the base directory are processed too; the subfolder becomes
part of the resource group, so all translations of an invariant file must
live in the same folder as it. Comments in JSON files are not supported.
"""

from pathlib import Path
from typing import Iterable, Optional

from .config import ProviderConfig
from .exporter import ResultCallback, export_resource_strings
from .importer import import_resource_strings
from .resources import OperationResultItem, ResourceString, StorageType


class JsonResourcesProvider:
    """
    Resources provider backed by a directory of per-locale JSON files.

    Holds the host configuration only; every import/export call is a
    self-contained pass with its own caches.
    """

    name = "JSON Resources Provider"
    description = "Standard JSON Resources Provider. Every JSON file contains one language."
    storage_location_user_text = "Base Directory where language files are located"
    storage_type = StorageType.DIRECTORY

    def __init__(self, storage_location: str, solution_path: Optional[str] = None):
        """
        Initialize the provider.

        Args:
            storage_location: Base directory, absolute or relative to solution_path
            solution_path: Directory relative locations are resolved against

        Raises:
            InvalidConfiguration: storage_location is empty or blank
        """
        self.config = ProviderConfig(
            storage_location=storage_location,
            solution_path=solution_path,
        )

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "JsonResourcesProvider":
        return cls(config.storage_location, config.solution_path)

    @property
    def storage_location(self) -> str:
        return self.config.storage_location

    @storage_location.setter
    def storage_location(self, value: str) -> None:
        self.config.storage_location = value

    @property
    def solution_path(self) -> Optional[str]:
        return self.config.solution_path

    @solution_path.setter
    def solution_path(self, value: Optional[str]) -> None:
        self.config.solution_path = value

    @property
    def base_directory(self) -> Path:
        return self.config.base_directory

    def import_resource_strings(self, project_name: str = "") -> list[ResourceString]:
        """
        Read all resource strings of a project from disk.

        Args:
            project_name: Project identifier (not used for lookup; one
                provider instance serves one base directory)

        Returns:
            All ResourceString records, including those without invariant text
        """
        return import_resource_strings(self.base_directory)

    def export_resource_strings(
        self,
        project_name: str,
        resource_strings: Iterable[ResourceString],
        result_callback: Optional[ResultCallback] = None,
    ) -> list[OperationResultItem]:
        """
        Write resource strings of a project to disk.

        Args:
            project_name: Project identifier reported in each result item
            resource_strings: Records with related translations
            result_callback: Receives one OperationResultItem per processed file

        Returns:
            The reported result items
        """
        return export_resource_strings(
            self.base_directory,
            resource_strings,
            project_name=project_name,
            result_callback=result_callback,
        )

    @classmethod
    def describe(cls) -> dict:
        """Provider metadata as shown to the user when selecting a provider."""
        return {
            "name": cls.name,
            "description": cls.description,
            "storage_type": cls.storage_type.value,
            "storage_location_user_text": cls.storage_location_user_text,
        }

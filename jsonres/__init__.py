"""
jsonres - JSON resources provider for localization hosts

Synchronizes localized string resources with a directory tree of
per-locale JSON files (<group>.json, <group>.<locale>.json).

Quick start:
    provider = JsonResourcesProvider("locales", solution_path="/path/to/solution")
    resources = valid_only(provider.import_resource_strings("webapp"))
    provider.export_resource_strings("webapp", resources, print)
"""

__version__ = "1.0.0"

from .config import ProviderConfig, load_config, resolve_base_directory
from .errors import (
    InvalidConfiguration,
    MalformedResourceFile,
    ProviderError,
    ResourceDirectoryNotFound,
    ResourceFileUnreadable,
)
from .exporter import export_resource_strings
from .importer import import_resource_strings
from .provider import JsonResourcesProvider
from .resources import (
    INVARIANT_LOCALE,
    OperationResult,
    OperationResultItem,
    ResourceString,
    StorageType,
    valid_only,
)

__all__ = [
    "JsonResourcesProvider",
    "ProviderConfig",
    "load_config",
    "resolve_base_directory",
    "import_resource_strings",
    "export_resource_strings",
    "ResourceString",
    "OperationResult",
    "OperationResultItem",
    "StorageType",
    "INVARIANT_LOCALE",
    "valid_only",
    "ProviderError",
    "InvalidConfiguration",
    "MalformedResourceFile",
    "ResourceDirectoryNotFound",
    "ResourceFileUnreadable",
]

#!/usr/bin/env python3
"""
Exception types raised by the JSON resources provider.

Import failures are fatal and raised to the caller. Export failures are
reported per file through OperationResultItem and never raised.
"""

from pathlib import Path
from typing import Union


class ProviderError(Exception):
    """Base class for all provider errors."""


class InvalidConfiguration(ProviderError, ValueError):
    """Storage location is unset or blank, or a config file is unusable."""


class MalformedResourceFile(ProviderError, ValueError):
    """A resource file could not be parsed as a flat JSON string map."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Malformed resource file {self.path}: {reason}")


class ResourceDirectoryNotFound(ProviderError, FileNotFoundError):
    """The resolved base directory does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"Base directory not found: {self.path}")


class ResourceFileUnreadable(ProviderError, OSError):
    """A resource file exists but could not be read from disk."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read resource file {self.path}: {reason}")

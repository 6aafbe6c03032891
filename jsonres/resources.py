#!/usr/bin/env python3
"""
Data records exchanged between the provider and its host.

ResourceString is the universal resource record: one key inside one logical
resource file (its storage location), carrying text for any number of
locales. The empty string is the invariant locale.

OperationResultItem is the per-file outcome reported by an export run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional


INVARIANT_LOCALE = ""


@dataclass
class ResourceString:
    """
    One localized string resource.

    Attributes:
        name: Key of the string inside its resource file
        storage_location: Group path without locale and extension (e.g. "sub/strings")
        texts: Map of locale -> text (None for a JSON null), in insertion order
    """
    name: str
    storage_location: str = ""
    texts: dict[str, Optional[str]] = field(default_factory=dict)

    def __post_init__(self):
        """Ensure name is string."""
        self.name = str(self.name)

    @property
    def identity(self) -> tuple[str, str]:
        return self.storage_location, self.name

    def get_locales(self) -> list[str]:
        """Locales this resource carries text for."""
        return list(self.texts)

    def get_locale_text(self, locale: str) -> Optional[str]:
        return self.texts.get(locale, "")

    def set_locale_text(self, locale: str, text: Optional[str]) -> None:
        self.texts[locale] = text

    @property
    def invariant_text(self) -> Optional[str]:
        return self.get_locale_text(INVARIANT_LOCALE)

    @property
    def is_valid(self) -> bool:
        """A resource is only usable when its invariant text is set."""
        return bool(self.invariant_text)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON/YAML serialization."""
        return {
            "name": self.name,
            "storage_location": self.storage_location,
            "texts": dict(self.texts),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ResourceString":
        """
        Create from dictionary.

        Accepts "key" as an alias of "name" and "group" as an alias of
        "storage_location". Locale texts must be strings.
        """
        name = data.get("name", data.get("key"))
        if name is None:
            raise ValueError(f"Resource entry without name: {data!r}")

        texts = data.get("texts") or {}
        if not isinstance(texts, dict):
            raise ValueError(f"texts of '{name}' must be a mapping")

        clean_texts = {}
        for locale, text in texts.items():
            if text is not None and not isinstance(text, str):
                raise ValueError(f"Text of '{name}' for locale '{locale}' is not a string")
            # YAML renders an empty key as None
            clean_texts["" if locale is None else str(locale)] = text

        return cls(
            name=name,
            storage_location=str(data.get("storage_location", data.get("group", ""))),
            texts=clean_texts,
        )


def valid_only(resources: Iterable[ResourceString]) -> list[ResourceString]:
    """Drop resources without invariant text, as the host does after import."""
    return [r for r in resources if r.is_valid]


class OperationResult(Enum):
    SUCCESS = "success"
    ERROR = "error"


class StorageType(Enum):
    """Kind of storage location a provider expects from its host."""
    FILE = "file"
    DIRECTORY = "directory"
    TEXT = "text"


@dataclass
class OperationResultItem:
    """Outcome of writing (or failing to load/write) one resource file."""
    path: str
    project_name: str = ""
    result: OperationResult = OperationResult.SUCCESS
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is OperationResult.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        data = {
            "path": self.path,
            "project_name": self.project_name,
            "result": self.result.value,
        }
        if self.message is not None:
            data["message"] = self.message
        return data

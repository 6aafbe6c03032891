#!/usr/bin/env python3
"""
Flat JSON string maps as stored in resource files.

Each resource file holds exactly one locale as a top-level JSON object
mapping keys to texts:

```json
{
  "hello": "Hello",
  "bye": "Goodbye"
}
```

Nested objects and arrays are not part of the format. null values are kept;
numbers and booleans are read as their string form.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

JSON_INDENT = 2


def _coerce_text(value: Any) -> Optional[str]:
    """null stays null; numbers and booleans become their string form."""
    if value is None or isinstance(value, str):
        return value
    return str(value)


def parse_string_map(content: str) -> dict[str, Optional[str]]:
    """
    Parse resource file content into a key -> text map.

    Args:
        content: Raw JSON file content

    Returns:
        Dict of key -> text. Empty content, null and {} all give an empty map.
        null values are kept as None, numbers and booleans are converted
        to strings.

    Raises:
        ValueError: Content is not valid JSON or not a flat map
    """
    if not content.strip():
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e.msg} at line {e.lineno} column {e.colno}")

    if data is None:
        return {}

    errors = validate_string_map(data)
    if errors:
        raise ValueError("; ".join(errors))

    return {key: _coerce_text(value) for key, value in data.items()}


def validate_string_map(data: Any) -> list[str]:
    """
    Validate a decoded JSON value as a flat map of scalar values.

    Returns:
        List of validation error messages (empty if valid)
    """
    if not isinstance(data, dict):
        return [f"Root element must be an object, got {type(data).__name__}"]

    errors = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            errors.append(f"Value of '{key}' must be a string, got {type(value).__name__}")
    return errors


def load_string_map(path: Union[str, Path]) -> dict[str, Optional[str]]:
    """Read and parse one resource file (UTF-8, BOM tolerated)."""
    content = Path(path).read_text(encoding="utf-8-sig")
    strings = parse_string_map(content)
    logger.debug("Loaded %d strings from %s", len(strings), path)
    return strings


def dump_string_map(strings: dict[str, Optional[str]]) -> str:
    """Serialize a key -> text map as indented, human-readable JSON."""
    coerced = {key: _coerce_text(value) for key, value in strings.items()}
    return json.dumps(coerced, indent=JSON_INDENT, ensure_ascii=False)


def write_string_map(path: Union[str, Path], strings: dict[str, Optional[str]]) -> None:
    """
    Replace the content of a resource file.

    The parent directory must already exist.
    """
    Path(path).write_text(dump_string_map(strings), encoding="utf-8")
    logger.debug("Wrote %d strings to %s", len(strings), path)

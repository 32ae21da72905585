"""
JSON normalization.

Turns sanitized text into the single object-shaped schema that feeds the
generation backend: an object is used as is, an array of objects is
reduced to the union of the keys of its elements.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import PARSE_FAILURE_MARKER, InvalidRootError, ParseError


def parse_json(text: str) -> Any:
    """Parse ``text`` as a JSON value.

    Raises:
        ParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(details=f"{PARSE_FAILURE_MARKER}: {e}") from e


def merge_object_into(target: dict[str, Any], source: dict[str, Any]) -> None:
    """Shallow-merge the keys of ``source`` into ``target``.

    The value seen last wins, except that ``null`` never replaces a value
    that is already known.
    """
    for key, value in source.items():
        if value is None and target.get(key) is not None:
            continue
        target[key] = value


def union_dict_from_array_elements(items: list[Any]) -> dict[str, Any]:
    """Collect every key of every object element of ``items``.

    Non-object elements are ignored; an array without object elements
    yields an empty dict.
    """
    result: dict[str, Any] = {}
    for item in items:
        if isinstance(item, dict):
            merge_object_into(result, item)
    return result


def normalize(value: Any) -> dict[str, Any]:
    """Reduce a parsed JSON value to a canonical object schema.

    Raises:
        InvalidRootError: If the root is neither an object nor an array
    """
    if isinstance(value, dict):
        return value
    if isinstance(value, list):
        return union_dict_from_array_elements(value)
    raise InvalidRootError(details=f"Top-level JSON value is a {type(value).__name__}, expected an object or an array")


def canonical_schema(text: str) -> dict[str, Any]:
    """Parse and normalize ``text`` in one step."""
    return normalize(parse_json(text))

# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Canonical JSON types and helpers used across lintrollup.

This module defines the JSON value shapes shared by the payload views and the
structured log formatter. It has no dependencies on logging or configuration
so it can be imported from anywhere in the package.
"""

from __future__ import annotations

from enum import Enum
from typing import cast

__all__ = [
    "JSONList",
    "JSONMapping",
    "JSONValue",
    "normalise_enums_for_json",
]

type JSONValue = str | int | float | bool | dict[str, JSONValue] | list[JSONValue] | None
type JSONMapping = dict[str, JSONValue]
type JSONList = list[JSONValue]


def normalise_enums_for_json(value: object) -> JSONValue:
    """Recursively convert Enum keys/values to their payloads for JSON serialisation.

    Args:
        value: Arbitrary Python object hierarchy that may include ``Enum``
            instances, mappings, or sequences.

    Returns:
        A JSON-compatible structure (built from ``dict``/``list``/primitives)
        with all enum keys and values replaced by their ``.value`` payloads.
        Enum keys are rendered as strings because JSON object keys must be.
    """

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return cast("JSONValue", obj.value)
        if isinstance(obj, dict):
            mapping_obj = cast("dict[object, object]", obj)
            result: dict[str, JSONValue] = {}
            for key, raw_val in mapping_obj.items():
                if isinstance(key, Enum):
                    norm_key: str = str(key.value)
                elif isinstance(key, str):
                    norm_key = key
                else:
                    norm_key = str(key)
                result[norm_key] = _convert(raw_val)
            return cast("JSONValue", result)
        if isinstance(obj, list | tuple):
            seq_obj = cast("list[object] | tuple[object, ...]", obj)
            return [_convert(item) for item in seq_obj]
        return cast("JSONValue", obj)

    return _convert(value)

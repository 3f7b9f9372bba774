"""Utility functions for the jsonmask engine."""

from __future__ import annotations

import math
from typing import Any, Optional

from .models import ValueKind

PATH_SEPARATOR = "/"
# Path of the document root; a top-level key "k" lives at "/k"
ROOT_PATH = ""


def child_path(parent_path: str, key: str) -> str:
    """Build the path of an object member."""
    return f"{parent_path}{PATH_SEPARATOR}{key}"


def array_element_path(parent_path: str, index: int) -> str:
    """Build the path of an array element: attaches directly to the array's path."""
    return f"{parent_path}[{index}]"


def value_kind(value: Any) -> Optional[ValueKind]:
    """
    Classify a parsed JSON value.

    Returns None for anything that is not one of the six JSON kinds.
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, check it first
    elif isinstance(value, bool):
        return ValueKind.BOOLEAN
    elif isinstance(value, (int, float)):
        return ValueKind.NUMBER
    elif isinstance(value, str):
        return ValueKind.STRING
    elif isinstance(value, list):
        return ValueKind.ARRAY
    elif isinstance(value, dict):
        return ValueKind.OBJECT
    return None


def is_integer(value: int | float) -> bool:
    """Check whether a number has no fractional part, regardless of magnitude."""
    if isinstance(value, int):
        return True
    if not math.isfinite(value):
        return False
    return float(int(value)) == value


def get_type_name(value: Any) -> str:
    """Get a friendly type name for a value."""
    kind = value_kind(value)
    if kind is not None:
        return kind.value
    return type(value).__name__


def get_text_size_mb(text: str) -> float:
    """Get the size of a JSON document in megabytes."""
    return len(text.encode("utf-8")) / (1024 * 1024)

# src/featuredemo/mapping.py
"""
Dictionary value transformation helpers.
"""

import re
from typing import Any, Callable, Dict, Hashable, Mapping, Optional

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1


def parse_int(text: str) -> Optional[int]:
    """Parse a strict decimal integer, returning None when it does not parse.

    Unlike ``int()`` this rejects surrounding whitespace, underscores and
    non-ASCII digits, and returns None for values outside the signed 64-bit
    range.
    """
    if not isinstance(text, str) or not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def compact_map_values(
    mapping: Mapping[Hashable, Any],
    transform: Callable[[Any], Any] = lambda value: value,
) -> Dict[Hashable, Any]:
    """Map every value through ``transform`` and drop entries that become None.

    Keys are kept unchanged and surviving entries keep the input order. The
    default transform keeps exactly the entries whose value is present.
    """
    result = {}
    for key, value in mapping.items():
        transformed = transform(value)
        if transformed is not None:
            result[key] = transformed
    return result

"""Read-only traversal over mappings.

Every callback is invoked as ``fn(value, key, mapping)``. None of these
functions modify the mapping they are given; mutating it from inside a
callback is unsupported.

Note: ``filter`` and ``map`` shadow the builtins inside this module.
"""

from __future__ import annotations
from collections.abc import Mapping, Sequence
from typing import Any, Optional

import numpy as np
import pandas as pd

from . import constants
from .types import AnyMapping, FindResult, Predicate, Visitor


def for_each(m: AnyMapping, fn: Visitor) -> None:
    for key in m:
        fn(m[key], key, m)


def filter(m: AnyMapping, predicate: Predicate) -> dict:
    """New dict holding only the entries for which ``predicate`` is truthy."""
    return {key: m[key] for key in m if predicate(m[key], key, m)}


def map(m: AnyMapping, fn: Visitor) -> dict:
    """New dict with the same keys and ``fn(value, key, m)`` as values."""
    return {key: fn(m[key], key, m) for key in m}


def some(m: AnyMapping, predicate: Predicate) -> bool:
    for key in m:
        if predicate(m[key], key, m):
            return True
    return False


def every(m: AnyMapping, predicate: Predicate) -> bool:
    for key in m:
        if not predicate(m[key], key, m):
            return False
    return True


def get(m: Optional[AnyMapping], key: Any, default: Any = None) -> Any:
    """
    Value stored under ``key``, or ``default`` when the key is absent.

    Presence is a membership test, so stored falsy values (``0``, ``""``,
    ``None``) are returned as-is. A ``None`` mapping counts as empty.
    """
    if m is not None and key in m:
        return m[key]
    return default


def count(m: AnyMapping) -> int:
    return len(m)


def is_empty(m: AnyMapping) -> bool:
    return len(m) == 0


def get_any_key(m: AnyMapping) -> Any:
    """First key in iteration order, or None for an empty mapping."""
    return next(iter(m), None)


def get_any_value(m: AnyMapping) -> Any:
    for key in m:
        return m[key]
    return None


def get_keys(m: AnyMapping) -> list:
    return list(m)


def get_values(m: AnyMapping) -> list:
    return [m[key] for key in m]


def _step(obj: Any, key: Any) -> Any:
    if isinstance(key, (bool, np.bool_)) and not isinstance(obj, Mapping):
        return None
    if isinstance(obj, Mapping):
        return obj[key] if key in obj else None
    if isinstance(obj, pd.Series):
        return obj.loc[key] if key in obj.index else None
    if isinstance(obj, pd.DataFrame):
        return obj[key] if key in obj.columns else None
    if isinstance(obj, np.ndarray) and obj.ndim > 0:
        if isinstance(key, (int, np.integer)) and -len(obj) <= key < len(obj):
            return obj[key]
        return None
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        if isinstance(key, int) and -len(obj) <= key < len(obj):
            return obj[key]
        return None
    return None


def get_value_by_path(obj: Any, *keys: Any) -> Any:
    """
    Walk nested mappings, sequences, arrays and pandas objects, one key per level.

    Useful for pulling values out of decoded JSON:
    ``get_value_by_path(doc, "foo", "entries", 3)``. The keys may also be
    passed as a single list or tuple. Returns None as soon as a level is
    missing, out of range or not indexable.
    """
    if len(keys) == constants.SINGLE_SEQUENCE_ARGC and isinstance(
        keys[0], constants.SEQUENCE_TYPES
    ):
        keys = tuple(keys[0])
    for key in keys:
        obj = _step(obj, key)
        if obj is None:
            break
    return obj


def find_key(m: AnyMapping, predicate: Predicate) -> Any:
    """First key whose entry satisfies ``predicate``, or None."""
    for key in m:
        if predicate(m[key], key, m):
            return key
    return None


def find_value(m: AnyMapping, predicate: Predicate) -> FindResult:
    """
    First value whose entry satisfies ``predicate``.

    Returns ``FindResult(found, value)`` so that a matched falsy value is
    not mistaken for a miss.
    """
    for key in m:
        value = m[key]
        if predicate(value, key, m):
            return FindResult(True, value)
    return FindResult(False)

from __future__ import annotations
import numbers
from collections.abc import Hashable
from typing import Any, Optional

import numpy as np
import pandas as pd

from . import config as _config
from .config import MapUtilsConfig
from .types import AnyMapping


def _is_real(v: Any) -> bool:
    if isinstance(v, (bool, np.bool_)):
        return False
    return isinstance(v, (numbers.Real, np.integer, np.floating))


def _is_nan(v: Any) -> bool:
    """True for float/numpy NaN and numpy NaT; never for other types."""
    if isinstance(v, (float, np.floating)):
        return bool(np.isnan(v))
    if isinstance(v, (np.datetime64, np.timedelta64)):
        return bool(np.isnat(v))
    return False


def _by_identity(v: Any) -> bool:
    # Mutable containers, arrays and frames only ever equal themselves.
    if isinstance(v, (np.ndarray, pd.Series, pd.DataFrame, pd.Index)):
        return True
    return not isinstance(v, Hashable)


def _eq(a: Any, b: Any) -> bool:
    try:
        result = a == b
    except (ValueError, TypeError):
        # mismatched shapes or labels, or an ambiguous array truth value
        return False
    return _truth(result)


def _truth(result: Any) -> bool:
    # Element-wise comparisons (arrays, frames) are not a yes/no answer.
    if isinstance(result, (bool, np.bool_)):
        return bool(result)
    return False


def strict_equals(a: Any, b: Any) -> bool:
    """
    Equality in the sense of ``===``.

    Identical objects are equal, except NaN which never equals anything.
    Real numbers compare by value across int/float/numpy types (so
    ``0.0 == -0.0``); bools only equal bools. Other hashable values compare
    with ``==`` when they share a type. Unhashable values (dicts, lists,
    arrays, frames) are equal only to themselves.
    """
    if _is_nan(a) or _is_nan(b):
        return False
    if a is b:
        return True
    if _is_real(a) and _is_real(b):
        return _eq(a, b)
    if type(a) is not type(b):
        return False
    if _by_identity(a):
        return False
    return _eq(a, b)


def is_egal(a: Any, b: Any) -> bool:
    """
    Whether two values are observably indistinguishable (SameValue).

    Differs from strict_equals in two places: ``0.0`` and ``-0.0`` are not
    egal, and any two NaN values are.
    """
    a_nan, b_nan = _is_nan(a), _is_nan(b)
    if a_nan or b_nan:
        return a_nan and b_nan
    if not strict_equals(a, b):
        return False
    if _is_real(a) and a == 0:
        return bool(np.signbit(float(a)) == np.signbit(float(b)))
    return True


def loose_equals(a: Any, b: Any) -> bool:
    """Python ``==`` with identity short-circuit; element-wise results count as unequal."""
    if a is b:
        return True
    return _eq(a, b)


def equals(a: AnyMapping, b: AnyMapping) -> bool:
    """Same key set and strict_equals on every value."""
    for key in a:
        if key not in b or not strict_equals(a[key], b[key]):
            return False
    for key in b:
        if key not in a:
            return False
    return True


def contains_key(m: Optional[AnyMapping], key: Any) -> bool:
    return m is not None and key in m


def contains_value(
    m: AnyMapping,
    value: Any,
    *,
    strict: Optional[bool] = None,
    config: Optional[MapUtilsConfig] = None,
) -> bool:
    """
    Whether any entry of ``m`` holds ``value``. O(n).

    Loose by default: Python ``==``, so ``1``, ``1.0`` and ``True`` all match
    each other. ``strict=True`` compares with is_egal instead.
    """
    loose = _config.resolve(
        None if strict is None else not strict, config, "loose_contains"
    )
    same = loose_equals if loose else is_egal
    for key in m:
        if same(m[key], value):
            return True
    return False


contains = contains_value

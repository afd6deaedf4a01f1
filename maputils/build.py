from __future__ import annotations
import logging
from collections import ChainMap
from collections.abc import Mapping
from typing import Any, Optional

import numpy as np
import pandas as pd

from . import config as _config
from . import constants, exceptions
from .config import MapUtilsConfig
from .types import AnyMapping, Cloneable

logger = logging.getLogger(__name__)


def create(*args: Any) -> dict:
    """
    Build a dict from alternating key/value arguments.

    ``create("a", 1, "b", 2) == {"a": 1, "b": 2}``. A single list or tuple
    argument is unpacked: either a flat key/value list or a list of
    ``(key, value)`` pairs.

    Raises:
        InvalidArgumentError: on an odd number of flat arguments.
    """
    if len(args) == constants.SINGLE_SEQUENCE_ARGC and isinstance(
        args[0], constants.SEQUENCE_TYPES
    ):
        items = args[0]
        if items and all(
            isinstance(p, constants.SEQUENCE_TYPES) and len(p) == constants.PAIR_LEN
            for p in items
        ):
            return {k: v for k, v in items}
        return create(*items)

    exceptions.require(
        len(args) % 2 == 0,
        f"Uneven number of arguments: {len(args)}",
        exceptions.InvalidArgumentError,
    )
    return {args[i]: args[i + 1] for i in range(0, len(args), 2)}


def create_set(*keys: Any) -> dict:
    """Map every key to True. A single list or tuple argument supplies the keys."""
    if len(keys) == constants.SINGLE_SEQUENCE_ARGC and isinstance(
        keys[0], constants.SEQUENCE_TYPES
    ):
        keys = tuple(keys[0])
    return {key: constants.SET_MEMBER for key in keys}


def create_object(prototype: AnyMapping) -> ChainMap:
    """Empty mapping whose reads fall back to ``prototype``; writes stay local."""
    return ChainMap({}, prototype)


def clone(m: Optional[AnyMapping]) -> Optional[dict]:
    """Shallow copy: nested containers are shared with the original."""
    if m is None:
        return None
    return {key: m[key] for key in m}


def transpose(m: AnyMapping) -> dict:
    """
    Swap keys and values.

    If several keys share a value, the last one in iteration order wins.
    Values must be hashable.
    """
    return {m[key]: key for key in m}


def deep_clone(
    obj: Any,
    *,
    detect_cycles: Optional[bool] = None,
    config: Optional[MapUtilsConfig] = None,
) -> Any:
    """
    Recursively copy mappings, lists, tuples and sets.

    - Values implementing ``Cloneable`` are copied by their own ``clone()``.
    - numpy arrays and pandas objects are deep-copied with their ``copy``.
    - Mappings come back as plain dicts; everything else is returned as-is.

    Shared sub-structures are copied once per reference, so aliasing inside
    ``obj`` is not preserved. A reference cycle raises CycleError; with
    ``detect_cycles=False`` the caller must guarantee the input is acyclic.
    """
    track = _config.resolve(detect_cycles, config, "detect_cycles")
    return _deep_clone(obj, set() if track else None)


def _deep_clone(obj: Any, active: Optional[set[int]]) -> Any:
    if isinstance(obj, Cloneable):
        return obj.clone()
    if isinstance(obj, np.ndarray):
        return obj.copy()
    if isinstance(obj, (pd.Series, pd.DataFrame, pd.Index)):
        return obj.copy(deep=True)
    if not isinstance(obj, (Mapping, list, tuple, set, frozenset)):
        return obj

    if active is not None:
        if id(obj) in active:
            logger.debug("Reference cycle through %s at id=%s", type(obj).__name__, id(obj))
            raise exceptions.CycleError(
                f"Cannot deep-clone a self-referencing {type(obj).__name__}"
            )
        active.add(id(obj))

    try:
        if isinstance(obj, Mapping):
            return {key: _deep_clone(obj[key], active) for key in obj}
        items = [_deep_clone(v, active) for v in obj]
        if isinstance(obj, list):
            return items
        if isinstance(obj, tuple):
            # namedtuples rebuild through _make
            make = getattr(obj, "_make", None)
            return make(items) if make is not None else tuple(items)
        return type(obj)(items)
    finally:
        if active is not None:
            active.discard(id(obj))

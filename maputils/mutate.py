from __future__ import annotations
from typing import Any, Callable, Optional

from . import exceptions
from .types import AnyMapping, AnyMutableMapping


def clear(m: AnyMutableMapping) -> None:
    """Remove every entry in place."""
    for key in list(m):
        del m[key]


def destroy(m: AnyMutableMapping) -> None:
    """Same as clear."""
    clear(m)


def remove(m: AnyMutableMapping, key: Any) -> bool:
    """Delete ``key`` if present; return whether anything was removed."""
    if key in m:
        del m[key]
        return True
    return False


def add(m: AnyMutableMapping, key: Any, value: Any) -> None:
    """
    Insert a new entry. Use set to overwrite an existing one.

    Raises DuplicateKeyError if ``key`` is already present; the stored value
    is left as it was.
    """
    exceptions.require(
        key not in m,
        f"The mapping already contains the key {key!r}",
        exceptions.DuplicateKeyError,
    )
    set(m, key, value)


def set(m: AnyMutableMapping, key: Any, value: Any) -> None:
    m[key] = value


def set_if_undefined(m: AnyMutableMapping, key: Any, value: Any) -> Any:
    """
    Store ``value`` only if ``key`` is absent.

    Returns the existing value, or ``value`` after attempting to store it.
    """
    if key in m:
        return m[key]
    m[key] = value
    return value


def set_if_absent_lazy(
    m: AnyMutableMapping, key: Any, supplier: Callable[[], Any]
) -> Any:
    """
    Like set_if_undefined, but the value comes from ``supplier()``.

    The supplier runs only when ``key`` is missing, which makes this handy
    for populate-on-miss caches.
    """
    if key in m:
        return m[key]
    value = supplier()
    m[key] = value
    return value


def extend(
    target: AnyMutableMapping, *sources: Optional[AnyMapping]
) -> AnyMutableMapping:
    """
    Shallow-merge ``sources`` into ``target`` in place and return ``target``.

    Later sources overwrite earlier ones and the target. ``None`` sources
    are skipped.

    Example:
        o = {}
        extend(o, {"a": 0, "b": 1})   # {'a': 0, 'b': 1}
        extend(o, {"b": 2, "c": 3})   # {'a': 0, 'b': 2, 'c': 3}
    """
    for source in sources:
        if source is None:
            continue
        for key in source:
            target[key] = source[key]
    return target

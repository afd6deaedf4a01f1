from __future__ import annotations
import logging
from collections.abc import MutableMapping
from types import MappingProxyType
from typing import Any, Iterator, Optional

from . import config as _config
from . import exceptions
from .config import MapUtilsConfig
from .types import AnyMapping

logger = logging.getLogger(__name__)

_MISSING = object()


class ImmutableView(MutableMapping):
    """
    Read-only facade over a mapping.

    Reads go straight to the wrapped mapping, so later changes made through
    the original reference show up here. Writes through the view are dropped
    (lenient) or raise ImmutableViewError (strict).
    """

    def __init__(self, target: AnyMapping, *, strict: bool = False):
        self._target = target
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def _reject(self, op: str, key: Any = _MISSING) -> None:
        what = op if key is _MISSING else f"{op} {key!r}"
        if self._strict:
            raise exceptions.ImmutableViewError(
                f"Cannot {what} through an immutable view"
            )
        logger.debug("Ignored write on immutable view: %s", what)

    # Reads
    def __getitem__(self, key: Any) -> Any:
        return self._target[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._target)

    def __len__(self) -> int:
        return len(self._target)

    def __contains__(self, key: object) -> bool:
        return key in self._target

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"

    # Writes
    def __setitem__(self, key: Any, value: Any) -> None:
        self._reject("set", key)

    def __delitem__(self, key: Any) -> None:
        self._reject("delete", key)

    def clear(self) -> None:
        self._reject("clear")

    def pop(self, key: Any, default: Any = _MISSING) -> Any:
        self._reject("pop", key)
        if key in self._target:
            return self._target[key]
        if default is _MISSING:
            raise KeyError(key)
        return default

    def popitem(self) -> tuple[Any, Any]:
        self._reject("popitem")
        for key in self._target:
            return key, self._target[key]
        raise KeyError("popitem(): mapping is empty")

    def setdefault(self, key: Any, default: Any = None) -> Any:
        if key in self._target:
            return self._target[key]
        self._reject("setdefault", key)
        return default

    def update(self, *args: Any, **kwargs: Any) -> None:
        if args or kwargs:
            self._reject("update")


def create_immutable_view(
    m: AnyMapping,
    *,
    strict: Optional[bool] = None,
    config: Optional[MapUtilsConfig] = None,
) -> AnyMapping:
    """
    Wrap ``m`` in an ImmutableView; ``m`` itself stays writable.

    Something that already is an immutable view is returned unchanged.
    """
    if is_immutable_view(m):
        return m
    return ImmutableView(m, strict=_config.resolve(strict, config, "strict_views"))


def is_immutable_view(m: Any) -> bool:
    return isinstance(m, (ImmutableView, MappingProxyType))

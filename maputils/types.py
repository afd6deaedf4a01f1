from __future__ import annotations
from typing import (
    Any,
    Callable,
    Mapping,
    MutableMapping,
    NamedTuple,
    Protocol,
    runtime_checkable,
)

# Callbacks receive (value, key, mapping), in that order.
Visitor = Callable[[Any, Any, Mapping[Any, Any]], Any]
Predicate = Callable[[Any, Any, Mapping[Any, Any]], Any]

AnyMapping = Mapping[Any, Any]
AnyMutableMapping = MutableMapping[Any, Any]


@runtime_checkable
class Cloneable(Protocol):
    """Capability for values that know how to copy themselves.

    deep_clone hands such values to their own ``clone`` instead of recursing
    into them.
    """

    def clone(self) -> Any: ...


class FindResult(NamedTuple):
    """Outcome of find_value.

    ``found`` separates "no entry matched" from "an entry matched and its
    value is falsy". Unpacks as a ``(found, value)`` pair.
    """

    found: bool
    value: Any = None

    def __bool__(self) -> bool:
        return self.found

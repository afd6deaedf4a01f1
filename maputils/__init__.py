from . import (
    constants,
    config,
    exceptions,
    types,
    compare,
    traverse,
    mutate,
    build,
    views,
)

from .compare import (
    contains,
    contains_key,
    contains_value,
    equals,
    is_egal,
    loose_equals,
    strict_equals,
)
from .traverse import (
    count,
    every,
    filter,
    find_key,
    find_value,
    for_each,
    get,
    get_any_key,
    get_any_value,
    get_keys,
    get_value_by_path,
    get_values,
    is_empty,
    map,
    some,
)
from .mutate import (
    add,
    clear,
    destroy,
    extend,
    remove,
    set,
    set_if_absent_lazy,
    set_if_undefined,
)
from .build import (
    clone,
    create,
    create_object,
    create_set,
    deep_clone,
    transpose,
)
from .views import ImmutableView, create_immutable_view, is_immutable_view
from .config import MapUtilsConfig, default_config
from .exceptions import (
    CycleError,
    DuplicateKeyError,
    ImmutableViewError,
    InvalidArgumentError,
    MapUtilsError,
)
from .types import Cloneable, FindResult

__all__ = [
    # modules
    "constants",
    "config",
    "exceptions",
    "types",
    "compare",
    "traverse",
    "mutate",
    "build",
    "views",
    # compare
    "is_egal",
    "strict_equals",
    "loose_equals",
    "equals",
    "contains_key",
    "contains_value",
    "contains",
    # traverse
    "for_each",
    "filter",
    "map",
    "some",
    "every",
    "get",
    "count",
    "is_empty",
    "get_any_key",
    "get_any_value",
    "get_keys",
    "get_values",
    "get_value_by_path",
    "find_key",
    "find_value",
    # mutate
    "clear",
    "destroy",
    "remove",
    "add",
    "set",
    "set_if_undefined",
    "set_if_absent_lazy",
    "extend",
    # build
    "create",
    "create_set",
    "create_object",
    "clone",
    "deep_clone",
    "transpose",
    # views
    "ImmutableView",
    "create_immutable_view",
    "is_immutable_view",
    # config / errors / types
    "MapUtilsConfig",
    "default_config",
    "MapUtilsError",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "ImmutableViewError",
    "CycleError",
    "Cloneable",
    "FindResult",
]

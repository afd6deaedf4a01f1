class MapUtilsError(Exception): ...


class DuplicateKeyError(MapUtilsError, KeyError):
    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class InvalidArgumentError(MapUtilsError, ValueError): ...


class ImmutableViewError(MapUtilsError, TypeError): ...


class CycleError(MapUtilsError, ValueError): ...


def require(condition: bool, message: str, exc: type[MapUtilsError] = MapUtilsError):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class MapUtilsConfig(BaseModel):
    """Behaviour switches for the few operations that have more than one mode.

    Attributes:
        strict_views: Writes through an immutable view raise instead of being ignored
        detect_cycles: deep_clone tracks the active path and raises on a cycle
        loose_contains: contains_value compares with ``==`` rather than is_egal
    """

    model_config = ConfigDict(frozen=True)

    strict_views: bool = False
    detect_cycles: bool = True
    loose_contains: bool = True


def default_config() -> MapUtilsConfig:
    return MapUtilsConfig()


def resolve(
    override: Optional[bool], config: Optional[MapUtilsConfig], field: str
) -> bool:
    """Per-call override wins, then the given config, then the defaults."""
    if override is not None:
        return bool(override)
    cfg = config or default_config()
    return bool(getattr(cfg, field))

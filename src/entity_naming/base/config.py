"""Naming Configuration Model.

Immutable configuration knobs that influence normalization and the reflective
fallback strategy. Instances are frozen pydantic models: they are validated on
construction, hashable, and never mutated once built. Derive a new config with
:meth:`NamingConfig.derive` instead of editing one in place.

Knobs:
    - ``include_builtins``: when false, builtin/no-package names (``int``,
      ``str``) resolve to the empty string.
    - ``max_unwrap``: container unwrapping budget. Values ``<= 0`` are clamped
      to :data:`DEFAULT_MAX_UNWRAP`.
    - ``map_prefer_elem``: which side of ``dict[K, V]`` is tried first when
      searching for a named inner type (``V`` when true, ``K`` otherwise).

Examples:
    >>> cfg = NamingConfig()
    >>> cfg.max_unwrap
    8
    >>> cfg.derive(map_prefer_elem=False).map_prefer_elem
    False
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_INCLUDE_BUILTINS = True
DEFAULT_MAX_UNWRAP = 8
DEFAULT_MAP_PREFER_ELEM = True


class NamingConfig(BaseModel):
    """Read-only resolution knobs passed to every strategy.

    :param include_builtins: Whether builtin/no-package types produce a name
    :type include_builtins: bool
    :param max_unwrap: Container unwrapping budget, clamped to the default when ``<= 0``
    :type max_unwrap: int
    :param map_prefer_elem: Prefer the value side of mappings over the key side
    :type map_prefer_elem: bool
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    include_builtins: bool = DEFAULT_INCLUDE_BUILTINS
    max_unwrap: int = DEFAULT_MAX_UNWRAP
    map_prefer_elem: bool = DEFAULT_MAP_PREFER_ELEM

    @field_validator("max_unwrap")
    @classmethod
    def _clamp_max_unwrap(cls, value: int) -> int:
        if value <= 0:
            return DEFAULT_MAX_UNWRAP
        return value

    def derive(self, **changes: Any) -> "NamingConfig":
        """Return a validated copy with ``changes`` applied."""
        return NamingConfig(**{**self.model_dump(), **changes})


def default_config() -> NamingConfig:
    """Return the process default configuration."""
    return NamingConfig()

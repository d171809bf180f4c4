"""Reflective fallback strategy.

The universal last step of the chain: derive ``<package>.<TypeName>`` from the
type itself. Containers are unwrapped by :func:`~entity_naming.types.normalize`,
instantiation suffixes are stripped (``Box[int]`` -> ``Box``), and the package
is the last segment of the defining module (``myapp.domain.models`` ->
``models``). Builtin/no-package types keep their bare name unless
``include_builtins`` is off, in which case they resolve to ``""``.

Results are memoized process-wide by ``(type, include_builtins, max_unwrap,
map_prefer_elem)``. The cache only grows; every key maps to an immutable
answer, so it never needs invalidation.
"""

import threading
from typing import Any

from entity_naming.base.config import NamingConfig
from entity_naming.base.errors import NilTypeError, NotNamedError
from entity_naming.base.interfaces import Strategy
from entity_naming.types import normalize

_type_name_cache: dict[tuple[Any, bool, int, bool], str] = {}
_type_name_cache_lock = threading.Lock()


class ReflectStrategy(Strategy):
    """Compute a ``package.Type`` name via normalization; handles every non-None input."""

    def try_resolve(self, value: Any, config: NamingConfig) -> tuple[str, bool]:
        if value is None:
            return "", False
        return name_for_type(type(value), config), True

    def try_resolve_type(self, hint: Any, config: NamingConfig) -> tuple[str, bool]:
        if hint is None:
            return "", False
        return name_for_type(hint, config), True


def name_for_type(hint: Any, config: NamingConfig) -> str:
    """Return the memoized reflective name of ``hint`` (``""`` when unnamed)."""
    key = (hint, config.include_builtins, config.max_unwrap, config.map_prefer_elem)
    try:
        cached = _type_name_cache.get(key)
    except TypeError:
        # unhashable hint, e.g. Annotated metadata holding a dict
        return _compute_name(hint, config)
    if cached is not None:
        return cached

    name = _compute_name(hint, config)
    with _type_name_cache_lock:
        _type_name_cache.setdefault(key, name)
    return name


def _compute_name(hint: Any, config: NamingConfig) -> str:
    try:
        base = normalize(hint, config)
    except (NilTypeError, NotNamedError):
        return ""

    name = strip_type_params(base.name)
    if base.package:
        return f"{base.package.rsplit('.', 1)[-1]}.{name}"
    if not config.include_builtins:
        return ""
    return name


def strip_type_params(name: str) -> str:
    """Remove a generic instantiation suffix: ``"Box[int, str]"`` -> ``"Box"``."""
    index = name.find("[")
    return name[:index] if index >= 0 else name

"""Normalization of container types to their nearest named type.

Unwrapping policy (at most ``config.max_unwrap`` steps):
    - ``POINTER`` / ``SLICE`` / ``ARRAY`` / ``CHANNEL``: continue with the element.
    - ``MAP``: return the preferred side if it is named (value side when
      ``map_prefer_elem``, key side otherwise), else the other side if named,
      else continue with the element. The key is never unwrapped further.
    - anything else: return it if named, otherwise raise :class:`NotNamedError`.

When the budget runs out the last descriptor is checked once more for a name.
The function is pure and safe to call from any number of threads.
"""

from typing import Any

from entity_naming.base.config import DEFAULT_MAX_UNWRAP, NamingConfig
from entity_naming.base.errors import NilTypeError, NotNamedError

from .descriptor import Kind, TypeDescriptor, describe

_UNWRAP_KINDS = frozenset({Kind.POINTER, Kind.SLICE, Kind.ARRAY, Kind.CHANNEL})


def normalize(hint: Any, config: NamingConfig) -> TypeDescriptor:
    """Return the nearest named type inside ``hint``.

    :param hint: A type, typing construct, or :class:`TypeDescriptor`
    :param config: Supplies ``max_unwrap`` and ``map_prefer_elem``
    :raises NilTypeError: If ``hint`` is ``None``
    :raises NotNamedError: If no named type is found within the budget
    """
    if hint is None:
        raise NilTypeError()
    t: TypeDescriptor | None = describe(hint)

    max_unwrap = config.max_unwrap
    if max_unwrap <= 0:
        max_unwrap = DEFAULT_MAX_UNWRAP

    for _ in range(max_unwrap):
        if t is None:
            break
        if t.kind in _UNWRAP_KINDS:
            t = t.elem
        elif t.kind is Kind.MAP:
            first, second = (t.elem, t.key) if config.map_prefer_elem else (t.key, t.elem)
            if first is not None and first.is_named:
                return first
            if second is not None and second.is_named:
                return second
            t = t.elem
        elif t.is_named:
            return t
        else:
            raise NotNamedError(hint)

    if t is not None and t.is_named:
        return t
    raise NotNamedError(hint)

"""Thread-safe Type Registry.

:class:`TypeRegistry` maps the nearest named type of a registered hint to an
explicit entity name. Types are normalized with the registry's own
configuration before they are stored or looked up, so ``Optional[User]``,
``list[User]`` and ``User`` all share one entry.

Concurrency:
    - Lookups read the current mapping without locking.
    - Registration does an optimistic unlocked check, then takes the write lock
      and re-checks before storing, so concurrent writers cannot lose updates
      or double count.
    - :meth:`TypeRegistry.reset` swaps in a fresh mapping; readers holding the
      old one are unaffected.

Examples:
    >>> registry = TypeRegistry(NamingConfig())
    >>> registry.register(User, "domain.user")
    >>> registry.lookup(list[User])
    ('domain.user', True)
"""

import threading
from typing import Any

from entity_naming.base.config import NamingConfig
from entity_naming.base.errors import (
    ConflictError,
    EmptyNameError,
    NilTypeError,
    NotNamedError,
    RegistryError,
)
from entity_naming.base.interfaces import Entry, Registry
from entity_naming.types import TypeDescriptor, normalize


class TypeRegistry(Registry):
    """Registry backed by a dict guarded by a write lock.

    Only ``max_unwrap`` and ``map_prefer_elem`` of the configuration matter
    here; ``include_builtins`` is irrelevant to explicit registrations.

    :param config: Normalization settings, defaults to :class:`NamingConfig`
    :type config: NamingConfig | None
    """

    def __init__(self, config: NamingConfig | None = None):
        self._config = config if config is not None else NamingConfig()
        self._lock = threading.Lock()
        self._names: dict[TypeDescriptor, str] = {}
        self._count = 0

    @property
    def config(self) -> NamingConfig:
        return self._config

    def register(self, hint: Any, name: str) -> None:
        """Associate the nearest named type of ``hint`` with ``name``.

        :raises NilTypeError: If ``hint`` is ``None``
        :raises EmptyNameError: If ``name`` is empty
        :raises NotNamedError: If ``hint`` has no named inner type
        :raises ConflictError: If the type is already bound to another name
        :raises RegistryError: If the normalized type cannot be used as a key
        """
        if hint is None:
            raise NilTypeError()
        if not name:
            raise EmptyNameError()

        base = normalize(hint, self._config)
        try:
            hash(base)
        except TypeError as e:
            raise RegistryError(f"Unhashable type cannot be registered: {base.identity!r}") from e

        existing = self._names.get(base)
        if existing is not None:
            if existing == name:
                return
            raise ConflictError(base.identity, existing, name)

        with self._lock:
            existing = self._names.get(base)
            if existing is not None:
                if existing == name:
                    return
                raise ConflictError(base.identity, existing, name)
            self._names[base] = name
            self._count += 1

    def lookup(self, hint: Any) -> tuple[str, bool]:
        """Return ``(name, True)`` for a registered type, else ``("", False)``.

        Types that cannot be normalized or hashed are reported as not found.
        """
        if hint is None:
            return "", False
        try:
            base = normalize(hint, self._config)
        except (NilTypeError, NotNamedError):
            return "", False
        try:
            name = self._names.get(base)
        except TypeError:
            return "", False
        if name is None:
            return "", False
        return name, True

    def entries(self) -> list[Entry]:
        with self._lock:
            items = list(self._names.items())
        return [Entry(type=base.identity, name=name) for base, name in items]

    def count(self) -> int:
        with self._lock:
            return self._count

    def reset(self) -> None:
        with self._lock:
            self._names = {}
            self._count = 0

    def __repr__(self) -> str:
        return f"TypeRegistry(entries={self.count()}, config={self._config!r})"

"""Layer Interfaces for the Resolution Pipeline.

Abstract base classes for the pluggable layers that a naming service snapshot
is made of. Applications may supply their own registry, resolver or builder by
subclassing these; the defaults live in :mod:`entity_naming.registry`,
:mod:`entity_naming.resolver` and :mod:`entity_naming.builder`.

Layering:
    1. **Strategy**: one resolution technique (self-naming, registry, reflection)
    2. **Resolver**: walks an ordered list of strategies
    3. **Registry**: explicit type -> name mapping consulted by a strategy
    4. **Builder**: constructs registry/resolver pairs from a configuration

.. note::
   Implementations must be safe for concurrent readers. Published snapshots
   share registry and resolver instances across threads without locking.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .config import NamingConfig


@dataclass(frozen=True)
class Entry:
    """A single (type, name) association in a registry snapshot.

    :param type: The normalized type (or hand-built descriptor) that was registered
    :type type: Any
    :param name: The associated entity name
    :type name: str
    """

    type: Any
    name: str


class Registry(ABC):
    """Explicit, reflection-free lookup for known types."""

    @abstractmethod
    def register(self, hint: Any, name: str) -> None:
        """Associate the nearest named type of ``hint`` with ``name``.

        Must be idempotent for the same pair and raise
        :class:`~entity_naming.base.errors.ConflictError` for a different name.
        """

    @abstractmethod
    def lookup(self, hint: Any) -> tuple[str, bool]:
        """Return ``(name, True)`` if ``hint`` is registered, else ``("", False)``."""

    @abstractmethod
    def entries(self) -> list[Entry]:
        """Return a point-in-time copy of all entries (order unspecified)."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of registered entries."""

    @abstractmethod
    def reset(self) -> None:
        """Remove every entry."""


class Strategy(ABC):
    """A pluggable resolution step chained by a :class:`Resolver`."""

    @abstractmethod
    def try_resolve(self, value: Any, config: NamingConfig) -> tuple[str, bool]:
        """Attempt to name ``value``. Return ``(name, True)`` if handled, else ``("", False)``."""

    @abstractmethod
    def try_resolve_type(self, hint: Any, config: NamingConfig) -> tuple[str, bool]:
        """Attempt to name the type ``hint`` without an instance."""


class Resolver(ABC):
    """Coordinates strategies to resolve names for values and types."""

    @abstractmethod
    def resolve(self, value: Any, config: NamingConfig) -> str:
        """Return a stable name for ``value`` or ``""`` if none can be determined."""

    @abstractmethod
    def resolve_type(self, hint: Any, config: NamingConfig) -> str:
        """Return a stable name for ``hint`` or ``""`` if none can be determined."""


class Builder(ABC):
    """Composes a :class:`Registry` and a :class:`Resolver` from a configuration.

    Implementations may migrate state from the previous instances or ignore
    them. ``extension`` is an opaque payload whose meaning is defined by the
    builder. Builders must not perform I/O and must not call back into the
    naming service's write operations.
    """

    @abstractmethod
    def build_registry(
        self, config: NamingConfig, previous: Registry | None, extension: Any
    ) -> Registry:
        """Construct a registry for ``config``, optionally migrating ``previous``."""

    @abstractmethod
    def build_resolver(
        self,
        config: NamingConfig,
        registry: Registry,
        previous: Resolver | None,
        extension: Any,
    ) -> Resolver:
        """Construct a resolver bound to ``registry``."""

"""
Naming Service Snapshot State Machine

A :class:`NamingService` owns exactly one published :class:`Snapshot` of
``(config, extension, registry, resolver, builder, pins)``. Readers load the
snapshot reference once and never lock; writers are serialized by a single
lock, derive a new snapshot from the old one plus the builder, validate it,
and publish it with one attribute assignment.

Rebuild rules:
    - A layer that is *pinned* is never replaced implicitly. Only an explicit
      :meth:`~NamingService.inject_registry` / :meth:`~NamingService.inject_resolver`
      or :meth:`~NamingService.hard_reset` replaces it.
    - When the registry is rebuilt (or injected) the resolver is rebuilt
      against it, unless the resolver is pinned.
    - Unpinning clears the flag only; the current layer stays until the next
      rebuilding write.

Failure semantics:
    A builder returning ``None`` aborts the write with :class:`NilLayerError`.
    Nothing is published, the previous snapshot stays current, and the write
    lock is released.

.. warning::
   Builders run while the write lock is held. They must not call back into the
   service's write operations.
"""

import dataclasses
import threading
from dataclasses import dataclass
from typing import Any, TypeVar

from entity_naming.base.config import NamingConfig
from entity_naming.base.errors import NilLayerError
from entity_naming.base.interfaces import Builder, Registry, Resolver
from entity_naming.builder import DefaultBuilder
from entity_naming.utils.logger import get_logger

logger = get_logger("naming_service")

T = TypeVar("T")


@dataclass(frozen=True)
class Snapshot:
    """Immutable, atomically published service state.

    :param config: Active configuration
    :param extension: Opaque builder payload
    :param registry: Current registry, never ``None`` once published
    :param resolver: Current resolver, never ``None`` once published
    :param builder: Builder used for implicit rebuilds
    :param registry_pinned: Registry survives implicit rebuilds
    :param resolver_pinned: Resolver survives implicit rebuilds
    """

    config: NamingConfig
    extension: Any
    registry: Registry
    resolver: Resolver
    builder: Builder
    registry_pinned: bool = False
    resolver_pinned: bool = False


class NamingService:
    """Process-wide naming state with lock-free reads and serialized writes.

    :param config: Initial configuration, defaults to :class:`NamingConfig`
    :type config: NamingConfig | None
    :param builder: Initial builder, defaults to :class:`DefaultBuilder`
    :type builder: Builder | None
    :param extension: Initial extension payload
    :type extension: Any
    :raises NilLayerError: If the builder produces no registry or resolver
    """

    def __init__(
        self,
        config: NamingConfig | None = None,
        builder: Builder | None = None,
        extension: Any = None,
    ):
        self._lock = threading.Lock()
        config = config if config is not None else NamingConfig()
        builder = builder if builder is not None else DefaultBuilder()

        registry = builder.build_registry(config, None, extension)
        self._require(registry, "registry", "init")
        resolver = builder.build_resolver(config, registry, None, extension)
        self._snapshot = self._validated(
            Snapshot(config, extension, registry, resolver, builder), "init"
        )

    # ===== READS =====

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def config(self) -> NamingConfig:
        return self._snapshot.config

    @property
    def extension(self) -> Any:
        return self._snapshot.extension

    @property
    def registry(self) -> Registry:
        return self._snapshot.registry

    @property
    def resolver(self) -> Resolver:
        return self._snapshot.resolver

    @property
    def builder(self) -> Builder:
        return self._snapshot.builder

    def is_registry_pinned(self) -> bool:
        return self._snapshot.registry_pinned

    def is_resolver_pinned(self) -> bool:
        return self._snapshot.resolver_pinned

    def resolve(self, value: Any) -> str:
        """Return the entity name for a runtime value, ``""`` if unresolvable."""
        snap = self._snapshot
        return snap.resolver.resolve(value, snap.config)

    def resolve_type(self, hint: Any) -> str:
        """Return the entity name for a type, ``""`` if unresolvable."""
        snap = self._snapshot
        return snap.resolver.resolve_type(hint, snap.config)

    def register_type(self, hint: Any, name: str) -> None:
        """Register ``hint`` under ``name`` in the current registry.

        Registry errors (``NilTypeError``, ``EmptyNameError``, ``NotNamedError``,
        ``ConflictError``) propagate to the caller.
        """
        self._snapshot.registry.register(hint, name)

    def extension_as(self, cls: type[T]) -> tuple[T | None, bool]:
        """Return ``(extension, True)`` if the extension is an instance of ``cls``."""
        ext = self._snapshot.extension
        if isinstance(ext, cls):
            return ext, True
        return None, False

    # ===== WRITES =====

    def reconfigure(self, config: NamingConfig | None) -> None:
        """Replace the configuration and rebuild unpinned layers.

        ``None`` restores the default configuration.
        """
        config = config if config is not None else NamingConfig()
        with self._lock:
            old = self._snapshot
            registry, resolver = self._rebuild(old, old.builder, config, old.extension, "reconfigure")
            self._publish(
                dataclasses.replace(old, config=config, registry=registry, resolver=resolver),
                "reconfigure",
            )

    def replace_extension(self, extension: Any) -> None:
        """Replace the extension payload and rebuild unpinned layers with it."""
        with self._lock:
            old = self._snapshot
            registry, resolver = self._rebuild(old, old.builder, old.config, extension, "replace_extension")
            self._publish(
                dataclasses.replace(old, extension=extension, registry=registry, resolver=resolver),
                "replace_extension",
            )

    def replace_builder(self, builder: Builder) -> None:
        """Swap the builder and rebuild unpinned layers with it.

        :raises NilLayerError: If ``builder`` is ``None``
        """
        self._require(builder, "builder", "replace_builder")
        with self._lock:
            old = self._snapshot
            registry, resolver = self._rebuild(old, builder, old.config, old.extension, "replace_builder")
            self._publish(
                dataclasses.replace(old, builder=builder, registry=registry, resolver=resolver),
                "replace_builder",
            )

    def inject_registry(self, registry: Registry) -> None:
        """Install ``registry`` as-is and pin it.

        The resolver is rebuilt against the new registry unless it is pinned.

        :raises NilLayerError: If ``registry`` is ``None``
        """
        self._require(registry, "registry", "inject_registry")
        with self._lock:
            old = self._snapshot
            resolver = old.resolver
            if not old.resolver_pinned:
                resolver = old.builder.build_resolver(old.config, registry, old.resolver, old.extension)
            self._publish(
                dataclasses.replace(old, registry=registry, resolver=resolver, registry_pinned=True),
                "inject_registry",
            )

    def inject_resolver(self, resolver: Resolver) -> None:
        """Install ``resolver`` as-is and pin it.

        :raises NilLayerError: If ``resolver`` is ``None``
        """
        self._require(resolver, "resolver", "inject_resolver")
        with self._lock:
            old = self._snapshot
            self._publish(
                dataclasses.replace(old, resolver=resolver, resolver_pinned=True),
                "inject_resolver",
            )

    def pin_registry(self) -> None:
        """Keep the current registry across later rebuilds."""
        self._set_pins("pin_registry", registry_pinned=True)

    def pin_resolver(self) -> None:
        """Keep the current resolver across later rebuilds."""
        self._set_pins("pin_resolver", resolver_pinned=True)

    def unpin_registry(self) -> None:
        """Allow the registry to be rebuilt by the next rebuilding write."""
        self._set_pins("unpin_registry", registry_pinned=False)

    def unpin_resolver(self) -> None:
        """Allow the resolver to be rebuilt by the next rebuilding write."""
        self._set_pins("unpin_resolver", resolver_pinned=False)

    def hard_reset(
        self,
        config: NamingConfig | None = None,
        extension: Any = None,
        registry: Registry | None = None,
        resolver: Resolver | None = None,
        builder: Builder | None = None,
    ) -> None:
        """Replace the whole snapshot in one step.

        Omitted ``config`` and ``builder`` keep their previous values. The
        extension is always replaced. Omitted ``registry`` / ``resolver`` are
        rebuilt. Pins are set exactly for the layers supplied here.
        """
        with self._lock:
            old = self._snapshot
            config = config if config is not None else old.config
            builder = builder if builder is not None else old.builder

            new_registry = registry
            if new_registry is None:
                new_registry = builder.build_registry(config, old.registry, extension)
                self._require(new_registry, "registry", "hard_reset")
            new_resolver = resolver
            if new_resolver is None:
                new_resolver = builder.build_resolver(config, new_registry, old.resolver, extension)

            self._publish(
                Snapshot(
                    config=config,
                    extension=extension,
                    registry=new_registry,
                    resolver=new_resolver,
                    builder=builder,
                    registry_pinned=registry is not None,
                    resolver_pinned=resolver is not None,
                ),
                "hard_reset",
            )

    # ===== INTERNALS =====

    def _rebuild(
        self,
        old: Snapshot,
        builder: Builder,
        config: NamingConfig,
        extension: Any,
        operation: str,
    ) -> tuple[Registry, Resolver]:
        registry = old.registry
        if not old.registry_pinned:
            registry = builder.build_registry(config, old.registry, extension)
            self._require(registry, "registry", operation)
        resolver = old.resolver
        if not old.resolver_pinned:
            resolver = builder.build_resolver(config, registry, old.resolver, extension)
        return registry, resolver

    def _set_pins(self, operation: str, **pins: bool) -> None:
        with self._lock:
            self._publish(dataclasses.replace(self._snapshot, **pins), operation)

    def _publish(self, snapshot: Snapshot, operation: str) -> None:
        # Caller holds the write lock
        self._snapshot = self._validated(snapshot, operation)
        logger.debug(
            f"{operation}: published {snapshot.config!r} "
            f"(registry_pinned={snapshot.registry_pinned}, resolver_pinned={snapshot.resolver_pinned})"
        )

    def _validated(self, snapshot: Snapshot, operation: str) -> Snapshot:
        self._require(snapshot.registry, "registry", operation)
        self._require(snapshot.resolver, "resolver", operation)
        return snapshot

    @staticmethod
    def _require(layer: Any, layer_name: str, operation: str) -> None:
        if layer is None:
            logger.error(f"{operation}: {layer_name} is None, keeping previous snapshot")
            raise NilLayerError(f"{operation}: nil {layer_name}")

    def __repr__(self) -> str:
        snap = self._snapshot
        return (
            f"NamingService(config={snap.config!r}, builder={snap.builder!r}, "
            f"registry_pinned={snap.registry_pinned}, resolver_pinned={snap.resolver_pinned})"
        )

"""Default Builder.

Builds a fresh :class:`~entity_naming.registry.TypeRegistry` per configuration
and a :class:`~entity_naming.resolver.ChainResolver` with the standard strategy
order: self-naming, registry lookup, reflective fallback.
"""

from typing import Any

from entity_naming.base.config import NamingConfig
from entity_naming.base.errors import EntityNamingError
from entity_naming.base.interfaces import Builder, Registry, Resolver
from entity_naming.registry import TypeRegistry
from entity_naming.resolver import ChainResolver
from entity_naming.strategies import NamerStrategy, ReflectStrategy, RegistryStrategy
from entity_naming.utils.logger import get_logger

logger = get_logger("naming_builder")


class DefaultBuilder(Builder):
    """Standard registry/resolver factory.

    Registry entries are carried over from ``previous`` on a best-effort basis:
    an entry that conflicts or no longer normalizes under the new configuration
    is skipped. The extension payload is ignored.
    """

    def build_registry(
        self, config: NamingConfig, previous: Registry | None, extension: Any
    ) -> Registry:
        registry = TypeRegistry(config)
        if previous is None:
            return registry

        migrated = skipped = 0
        for entry in previous.entries():
            try:
                registry.register(entry.type, entry.name)
                migrated += 1
            except EntityNamingError as e:
                skipped += 1
                logger.debug(f"Skipped registry entry {entry.name!r}: {e}")
        logger.debug(f"Migrated {migrated} registry entries ({skipped} skipped)")
        return registry

    def build_resolver(
        self,
        config: NamingConfig,
        registry: Registry,
        previous: Resolver | None,
        extension: Any,
    ) -> Resolver:
        return ChainResolver(NamerStrategy(), RegistryStrategy(registry), ReflectStrategy())

    def __repr__(self) -> str:
        return "DefaultBuilder()"

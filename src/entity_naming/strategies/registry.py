"""Registry lookup strategy."""

from typing import Any

from entity_naming.base.config import NamingConfig
from entity_naming.base.interfaces import Registry, Strategy


class RegistryStrategy(Strategy):
    """Consult an explicit :class:`Registry` for the value's type.

    Declines when no registry is bound or the type is not registered.

    :param registry: Registry to consult
    :type registry: Registry | None
    """

    def __init__(self, registry: Registry | None):
        self._registry = registry

    @property
    def registry(self) -> Registry | None:
        return self._registry

    def try_resolve(self, value: Any, config: NamingConfig) -> tuple[str, bool]:
        if value is None or self._registry is None:
            return "", False
        return self._registry.lookup(type(value))

    def try_resolve_type(self, hint: Any, config: NamingConfig) -> tuple[str, bool]:
        if hint is None or self._registry is None:
            return "", False
        return self._registry.lookup(hint)

"""Chain-of-responsibility resolver."""

from typing import Any

from entity_naming.base.config import NamingConfig
from entity_naming.base.interfaces import Resolver, Strategy


class ChainResolver(Resolver):
    """Resolve names by walking an immutable, ordered list of strategies.

    The first strategy that reports ``handled`` wins, even if the name it
    produced is empty. ``None`` entries are dropped at construction.

    :param strategies: Strategies in priority order
    :type strategies: Strategy | None
    """

    def __init__(self, *strategies: Strategy | None):
        self._strategies: tuple[Strategy, ...] = tuple(s for s in strategies if s is not None)

    @property
    def strategies(self) -> tuple[Strategy, ...]:
        return self._strategies

    def resolve(self, value: Any, config: NamingConfig) -> str:
        for strategy in self._strategies:
            name, handled = strategy.try_resolve(value, config)
            if handled:
                return name
        return ""

    def resolve_type(self, hint: Any, config: NamingConfig) -> str:
        for strategy in self._strategies:
            name, handled = strategy.try_resolve_type(hint, config)
            if handled:
                return name
        return ""

    def __repr__(self) -> str:
        names = ", ".join(type(s).__name__ for s in self._strategies)
        return f"ChainResolver({names})"

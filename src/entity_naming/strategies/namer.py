"""Self-naming fast path."""

from typing import Any

from entity_naming.base.config import NamingConfig
from entity_naming.base.interfaces import Strategy
from entity_naming.base.protocols import Namer, implements


class NamerStrategy(Strategy):
    """Use ``value.entity_name()`` when the value's class implements :class:`Namer`.

    A self-named value stops the chain. Bare types never qualify because there
    is no instance to ask, and neither do values whose ``entity_name`` is plain
    instance data.
    """

    def try_resolve(self, value: Any, config: NamingConfig) -> tuple[str, bool]:
        if not implements(value, Namer):
            return "", False
        return value.entity_name(), True

    def try_resolve_type(self, hint: Any, config: NamingConfig) -> tuple[str, bool]:
        return "", False

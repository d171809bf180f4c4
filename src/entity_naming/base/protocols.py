"""Self-Naming Protocols.

Values may name themselves instead of relying on the registry or on reflection.
The resolver checks these protocols structurally, so a class only needs the
right methods; it never has to inherit from anything here.

Contracts:
    - :class:`Namer` is type-level. ``entity_name()`` describes the kind of
      entity, not a particular instance. It must be non-empty, deterministic,
      cheap, free of I/O, and safe to call from many threads.
    - :class:`Identifier` adds an instance-level ``entity_id()``. An empty
      string means "no meaningful identifier".
    - :class:`Describer` adds human-oriented metadata for documentation and
      admin tooling. Empty strings mean "not provided".

Examples:
    >>> class User:
    ...     def __init__(self, user_id):
    ...         self.user_id = user_id
    ...     def entity_name(self):
    ...         return "domain.user"
    ...     def entity_id(self):
    ...         return self.user_id
    >>> isinstance(User("42"), Identifier)
    True
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Namer(Protocol):
    """A value that knows its own canonical, type-level entity name."""

    def entity_name(self) -> str: ...


@runtime_checkable
class Identifier(Namer, Protocol):
    """A :class:`Namer` that also identifies a particular instance."""

    def entity_id(self) -> str: ...


@runtime_checkable
class Describer(Namer, Protocol):
    """A :class:`Namer` carrying descriptive metadata about its entity type."""

    def entity_description(self) -> str: ...

    def entity_category(self) -> str: ...

    def entity_version(self) -> str: ...


class NamerFunc:
    """Adapt a zero-argument callable to the :class:`Namer` protocol.

    Useful when naming behaviour is passed around as a dependency rather than
    defined as a method on the entity type.

    Examples:
        >>> namer = NamerFunc(lambda: "domain.user")
        >>> namer.entity_name()
        'domain.user'
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[], str]):
        self._fn = fn

    def entity_name(self) -> str:
        return self._fn()

    def __repr__(self) -> str:
        return f"NamerFunc({self._fn!r})"


def implements(value: Any, protocol: type) -> bool:
    """Return ``True`` when ``value``'s class defines every method of ``protocol``.

    ``isinstance`` against a runtime-checkable protocol only checks that the
    attributes exist. This also requires each one to be callable on the class,
    so instance data that happens to share a method's name (an ``entity_name``
    column or model field) does not count. Class objects never qualify.

    Examples:
        >>> class Row:
        ...     def __init__(self):
        ...         self.entity_name = "orders"
        >>> implements(Row(), Namer)
        False
    """
    if value is None or isinstance(value, type):
        return False
    cls = type(value)
    methods = [name for name in dir(protocol) if name.startswith("entity_")]
    return all(callable(getattr(cls, name, None)) for name in methods)

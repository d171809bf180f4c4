"""Error Taxonomy for Entity Name Resolution.

This module defines the exception hierarchy raised by the normalizer, the
registry and the naming service. Every exception derives from
:class:`EntityNamingError` so callers can catch the whole family at once, while
the individual classes also subclass the closest built-in exception
(``TypeError`` / ``ValueError``) so generic handlers keep working.

Propagation rules:
    - Normalizer and registry errors are raised to the direct caller and are
      never logged or swallowed internally.
    - Resolvers never raise for unresolvable input; "no name" is the empty string.
    - :class:`NilLayerError` signals a broken builder and is always fatal for the
      write operation that triggered it. The previously published snapshot
      stays current.

Examples:
    Branch on a conflicting registration::

        >>> try:
        ...     registry.register(User, "domain.member")
        ... except ConflictError as e:
        ...     print(f"{e.requested!r} rejected, already {e.existing!r}")
"""

from typing import Any


class EntityNamingError(Exception):
    """Base exception for all entity naming errors."""

    pass


class NilTypeError(EntityNamingError, TypeError):
    """A ``None`` type descriptor was passed where one is required."""

    def __init__(self, message: str = "nil type descriptor provided"):
        super().__init__(message)


class NotNamedError(EntityNamingError, TypeError):
    """Normalization could not find a named type within the unwrap budget.

    Covers both "nested too deeply" and "fundamentally anonymous" (unions,
    ``Any``, callables, fixed-shape tuples).

    :param hint: The type or descriptor that failed to normalize
    :type hint: Any
    """

    def __init__(self, hint: Any = None, message: str | None = None):
        self.hint = hint
        if message is None:
            message = f"type has no declared name: {hint!r}" if hint is not None else "type has no declared name"
        super().__init__(message)


class RegistryError(EntityNamingError):
    """Exception for registry-related errors.

    Raised when a registration request cannot be honoured by a registry.
    """

    pass


class EmptyNameError(RegistryError, ValueError):
    """Registration was attempted with an empty name."""

    def __init__(self, message: str = "empty name provided"):
        super().__init__(message)


class ConflictError(RegistryError):
    """A type is already registered under a different name.

    The registry is left unchanged when this is raised.

    :param hint: The normalized type that is already bound
    :param existing: The name currently stored for the type
    :param requested: The name the caller attempted to register
    """

    def __init__(self, hint: Any, existing: str, requested: str):
        self.hint = hint
        self.existing = existing
        self.requested = requested
        super().__init__(
            f"conflicting registration for {hint!r}: already {existing!r}, got {requested!r}"
        )


class NilLayerError(EntityNamingError):
    """A builder produced, or a caller supplied, no registry/resolver/builder.

    Publishing a snapshot without usable layers would make every later read
    fail, so the write operation is aborted and nothing is published.
    """

    pass


class ConfigurationError(EntityNamingError):
    """Exception for configuration-related errors.

    Raised when the settings file is invalid, contains incompatible values, or
    names an import target that cannot be loaded.
    """

    pass

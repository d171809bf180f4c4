"""Base types shared by every layer: configuration, errors, interfaces and protocols."""

from .config import (
    DEFAULT_INCLUDE_BUILTINS,
    DEFAULT_MAP_PREFER_ELEM,
    DEFAULT_MAX_UNWRAP,
    NamingConfig,
    default_config,
)
from .errors import (
    ConfigurationError,
    ConflictError,
    EmptyNameError,
    EntityNamingError,
    NilLayerError,
    NilTypeError,
    NotNamedError,
    RegistryError,
)
from .interfaces import Builder, Entry, Registry, Resolver, Strategy
from .protocols import Describer, Identifier, Namer, NamerFunc, implements

__all__ = [
    "DEFAULT_INCLUDE_BUILTINS",
    "DEFAULT_MAP_PREFER_ELEM",
    "DEFAULT_MAX_UNWRAP",
    "NamingConfig",
    "default_config",
    "ConfigurationError",
    "ConflictError",
    "EmptyNameError",
    "EntityNamingError",
    "NilLayerError",
    "NilTypeError",
    "NotNamedError",
    "RegistryError",
    "Builder",
    "Entry",
    "Registry",
    "Resolver",
    "Strategy",
    "Describer",
    "Identifier",
    "Namer",
    "NamerFunc",
    "implements",
]

"""Entity Naming.

Stable, human-readable entity names for Python values and types, for use in
logs, metrics and audit trails.

This package contains:
- Type descriptors and the container normalizer
- The type registry and the resolution strategy chain
- The naming service snapshot state machine and its process default
- Settings loading, component logging and the CLI

Typical use goes through the process-default service::

    from entity_naming import register_type, resolve, resolve_type

    register_type(User, "domain.user")
    resolve(User())            # 'domain.user'
    resolve_type(list[Order])  # 'models.Order'
"""

__version__ = "0.3.0"

from entity_naming.base import (  # noqa: E402
    ConfigurationError,
    ConflictError,
    Describer,
    EmptyNameError,
    EntityNamingError,
    Identifier,
    NamerFunc,
    Namer,
    NamingConfig,
    NilLayerError,
    NilTypeError,
    NotNamedError,
    RegistryError,
)
from entity_naming.identity import entity_fields  # noqa: E402
from entity_naming.state import (  # noqa: E402
    NamingService,
    current_builder,
    current_config,
    current_extension,
    current_registry,
    current_resolver,
    extension_as,
    get_service,
    hard_reset,
    inject_registry,
    inject_resolver,
    is_registry_pinned,
    is_resolver_pinned,
    pin_registry,
    pin_resolver,
    reconfigure,
    register_type,
    replace_builder,
    replace_extension,
    reset_service,
    resolve,
    resolve_type,
    set_service,
    unpin_registry,
    unpin_resolver,
)

__all__ = [
    "__version__",
    "ConfigurationError",
    "ConflictError",
    "Describer",
    "EmptyNameError",
    "EntityNamingError",
    "Identifier",
    "NamerFunc",
    "Namer",
    "NamingConfig",
    "NamingService",
    "NilLayerError",
    "NilTypeError",
    "NotNamedError",
    "RegistryError",
    "entity_fields",
    "current_builder",
    "current_config",
    "current_extension",
    "current_registry",
    "current_resolver",
    "extension_as",
    "get_service",
    "hard_reset",
    "inject_registry",
    "inject_resolver",
    "is_registry_pinned",
    "is_resolver_pinned",
    "pin_registry",
    "pin_resolver",
    "reconfigure",
    "register_type",
    "replace_builder",
    "replace_extension",
    "reset_service",
    "resolve",
    "resolve_type",
    "set_service",
    "unpin_registry",
    "unpin_resolver",
]

"""Snapshot state machine and the process-default service."""

from .default import (
    create_service_from_settings,
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
from .service import NamingService, Snapshot

__all__ = [
    "NamingService",
    "Snapshot",
    "create_service_from_settings",
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

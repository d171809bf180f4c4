"""
Process-Default Naming Service

Module-level functions delegating to one lazily created :class:`NamingService`.
The default service is configured from the settings file (see
:mod:`entity_naming.utils.config`): the ``entity_naming`` section supplies the
initial :class:`NamingConfig`, and its ``registrations`` are imported and
registered once at creation.

Usage:
    >>> from entity_naming import resolve, register_type
    >>> register_type(User, "domain.user")
    >>> resolve(User())
    'domain.user'

Tests replace or drop the default with :func:`set_service` /
:func:`reset_service`.
"""

import threading
from pathlib import Path
from typing import Any, TypeVar

from entity_naming.base.config import NamingConfig
from entity_naming.base.errors import ConfigurationError, EntityNamingError
from entity_naming.base.interfaces import Builder, Registry, Resolver
from entity_naming.utils.config import load_naming_settings
from entity_naming.utils.logger import get_logger
from entity_naming.utils.targets import load_target

from .service import NamingService

logger = get_logger("naming_service")

T = TypeVar("T")

_service: NamingService | None = None
_service_lock = threading.Lock()


def create_service_from_settings(config_path: str | Path | None = None) -> NamingService:
    """Build a new service from the ``entity_naming`` settings section.

    :param config_path: Explicit settings file, defaults to the standard lookup
    :raises ConfigurationError: If the settings are invalid, or a registration
        target cannot be imported or registered
    """
    settings = load_naming_settings(config_path)
    service = NamingService(settings.to_config())
    for target, name in settings.registrations.items():
        hint = load_target(target)
        try:
            service.register_type(hint, name)
        except EntityNamingError as e:
            raise ConfigurationError(f"Cannot register '{target}' as '{name}': {e}") from e
    if settings.registrations:
        logger.info(f"Registered {len(settings.registrations)} configured entity names")
    return service


def get_service() -> NamingService:
    """Return the process-default service, creating it on first use.

    :raises ConfigurationError: If the settings file is invalid or a
        configured registration target cannot be imported
    """
    global _service
    service = _service
    if service is not None:
        return service
    with _service_lock:
        if _service is None:
            _service = create_service_from_settings()
        return _service


def set_service(service: NamingService) -> None:
    """Install ``service`` as the process default."""
    global _service
    with _service_lock:
        _service = service


def reset_service() -> None:
    """Drop the process default; the next call recreates it from settings."""
    global _service
    with _service_lock:
        _service = None


# ===== READS =====


def resolve(value: Any) -> str:
    return get_service().resolve(value)


def resolve_type(hint: Any) -> str:
    return get_service().resolve_type(hint)


def register_type(hint: Any, name: str) -> None:
    get_service().register_type(hint, name)


def current_config() -> NamingConfig:
    return get_service().config


def current_extension() -> Any:
    return get_service().extension


def current_registry() -> Registry:
    return get_service().registry


def current_resolver() -> Resolver:
    return get_service().resolver


def current_builder() -> Builder:
    return get_service().builder


def is_registry_pinned() -> bool:
    return get_service().is_registry_pinned()


def is_resolver_pinned() -> bool:
    return get_service().is_resolver_pinned()


def extension_as(cls: type[T]) -> tuple[T | None, bool]:
    return get_service().extension_as(cls)


# ===== WRITES =====


def reconfigure(config: NamingConfig | None) -> None:
    get_service().reconfigure(config)


def replace_extension(extension: Any) -> None:
    get_service().replace_extension(extension)


def replace_builder(builder: Builder) -> None:
    get_service().replace_builder(builder)


def inject_registry(registry: Registry) -> None:
    get_service().inject_registry(registry)


def inject_resolver(resolver: Resolver) -> None:
    get_service().inject_resolver(resolver)


def pin_registry() -> None:
    get_service().pin_registry()


def pin_resolver() -> None:
    get_service().pin_resolver()


def unpin_registry() -> None:
    get_service().unpin_registry()


def unpin_resolver() -> None:
    get_service().unpin_resolver()


def hard_reset(
    config: NamingConfig | None = None,
    extension: Any = None,
    registry: Registry | None = None,
    resolver: Resolver | None = None,
    builder: Builder | None = None,
) -> None:
    get_service().hard_reset(
        config=config, extension=extension, registry=registry, resolver=resolver, builder=builder
    )

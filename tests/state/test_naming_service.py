"""Tests for the naming service snapshot state machine.

Tests cover:
- Reads against the published snapshot
- Rebuild rules for reconfigure, extension and builder swaps
- Injection and pinning of registry and resolver
- Hard reset semantics
- NilLayer failures leaving the previous snapshot current
- Concurrent readers racing writers
"""

import threading
from dataclasses import dataclass
from unittest.mock import patch

import pytest

from entity_naming.base.config import NamingConfig
from entity_naming.base.errors import ConflictError, NilLayerError
from entity_naming.builder import DefaultBuilder
from entity_naming.registry import TypeRegistry
from entity_naming.resolver import ChainResolver
from entity_naming.state import NamingService, Snapshot
from entity_naming.strategies import ReflectStrategy
from tests.fixtures.domain_types import Order, Record, SelfNamed, User


class RecordingBuilder(DefaultBuilder):
    """DefaultBuilder that remembers its arguments."""

    def __init__(self):
        self.registry_calls = []
        self.resolver_calls = []

    def build_registry(self, config, previous, extension):
        self.registry_calls.append((config, previous, extension))
        return super().build_registry(config, previous, extension)

    def build_resolver(self, config, registry, previous, extension):
        self.resolver_calls.append((config, registry, previous, extension))
        return super().build_resolver(config, registry, previous, extension)


class NilRegistryBuilder(DefaultBuilder):
    def build_registry(self, config, previous, extension):
        return None


class NilResolverBuilder(DefaultBuilder):
    def build_resolver(self, config, registry, previous, extension):
        return None


@dataclass(frozen=True)
class TenantExtension:
    tenant: str


class TestReads:
    """Read operations see the published snapshot."""

    def test_initial_snapshot(self, service):
        snap = service.snapshot
        assert isinstance(snap, Snapshot)
        assert snap.config == NamingConfig()
        assert snap.extension is None
        assert isinstance(snap.registry, TypeRegistry)
        assert isinstance(snap.resolver, ChainResolver)
        assert isinstance(snap.builder, DefaultBuilder)
        assert not service.is_registry_pinned()
        assert not service.is_resolver_pinned()

    def test_resolve_by_reflection_and_registration(self, service):
        assert service.resolve(User()) == "domain_types.User"
        service.register_type(User, "domain.user")
        assert service.resolve(User()) == "domain.user"
        assert service.resolve_type(list[User]) == "domain.user"

    def test_entity_name_attribute_is_not_self_naming(self, service):
        assert service.resolve(Record()) == "domain_types.Record"

    def test_resolve_none(self, service):
        assert service.resolve(None) == ""
        assert service.resolve_type(None) == ""

    def test_self_naming_beats_registry_only_for_values(self, service):
        service.register_type(SelfNamed, "registered.self_named")
        assert service.resolve(SelfNamed()) == "custom.self_named"
        assert service.resolve_type(SelfNamed) == "registered.self_named"

    def test_register_type_propagates_conflicts(self, service):
        service.register_type(User, "domain.user")
        with pytest.raises(ConflictError):
            service.register_type(User, "domain.member")

    def test_extension_as(self):
        service = NamingService(extension=TenantExtension("acme"))
        assert service.extension_as(TenantExtension) == (TenantExtension("acme"), True)
        assert service.extension_as(str) == (None, False)


class TestRebuilds:
    """Implicit rebuilds of unpinned layers."""

    def test_reconfigure_rebuilds_and_migrates(self, service):
        service.register_type(User, "domain.user")
        old = service.snapshot
        new_config = NamingConfig(include_builtins=False)

        service.reconfigure(new_config)

        assert service.config == new_config
        assert service.registry is not old.registry
        assert service.resolver is not old.resolver
        assert service.registry.lookup(User) == ("domain.user", True)
        assert service.resolve(42) == ""

    def test_reconfigure_none_restores_defaults(self, service):
        service.reconfigure(NamingConfig(max_unwrap=2))
        service.reconfigure(None)
        assert service.config == NamingConfig()

    def test_old_snapshot_stays_valid(self, service):
        old = service.snapshot
        service.reconfigure(NamingConfig(include_builtins=False))
        assert old.resolver.resolve(42, old.config) == "int"
        assert old.config.include_builtins is True

    def test_replace_extension_passes_payload_to_builder(self):
        builder = RecordingBuilder()
        service = NamingService(builder=builder)
        ext = TenantExtension("acme")

        service.replace_extension(ext)

        assert service.extension is ext
        assert builder.registry_calls[-1][2] is ext
        assert builder.resolver_calls[-1][3] is ext
        assert service.config == NamingConfig()

    def test_replace_builder_uses_new_builder_with_old_state(self, service):
        old = service.snapshot
        builder = RecordingBuilder()

        service.replace_builder(builder)

        assert service.builder is builder
        config, previous, extension = builder.registry_calls[0]
        assert config is old.config
        assert previous is old.registry
        assert extension is old.extension
        assert builder.resolver_calls[0][1] is service.registry
        assert builder.resolver_calls[0][2] is old.resolver

    def test_replace_builder_none(self, service):
        with pytest.raises(NilLayerError):
            service.replace_builder(None)


class TestInjectionAndPins:
    """Explicit layers and pin flags."""

    def test_injected_registry_survives_reconfigure(self, service):
        registry = TypeRegistry()
        service.inject_registry(registry)
        resolver_after_inject = service.resolver

        service.reconfigure(NamingConfig(include_builtins=False))

        assert service.registry is registry
        assert service.is_registry_pinned()
        assert service.resolver is not resolver_after_inject

    def test_inject_registry_rebuilds_resolver_against_it(self, service):
        registry = TypeRegistry()
        registry.register(Order, "shop.order")

        service.inject_registry(registry)

        assert service.resolve(Order()) == "shop.order"

    def test_inject_registry_keeps_pinned_resolver(self, service):
        resolver = ChainResolver(ReflectStrategy())
        service.inject_resolver(resolver)

        service.inject_registry(TypeRegistry())

        assert service.resolver is resolver

    def test_injected_resolver_survives_rebuilds(self, service):
        resolver = ChainResolver(ReflectStrategy())
        service.inject_resolver(resolver)

        service.reconfigure(NamingConfig(max_unwrap=3))
        service.replace_extension("payload")
        service.replace_builder(DefaultBuilder())

        assert service.resolver is resolver
        assert service.is_resolver_pinned()

    def test_inject_none(self, service):
        with pytest.raises(NilLayerError):
            service.inject_registry(None)
        with pytest.raises(NilLayerError):
            service.inject_resolver(None)

    def test_pin_keeps_current_layers(self, service):
        registry, resolver = service.registry, service.resolver
        service.pin_registry()
        service.pin_resolver()

        service.reconfigure(NamingConfig(include_builtins=False))

        assert service.registry is registry
        assert service.resolver is resolver

    def test_unpin_does_not_rebuild(self, service):
        registry = TypeRegistry()
        service.inject_registry(registry)

        service.unpin_registry()

        assert service.registry is registry
        assert not service.is_registry_pinned()

        service.reconfigure(NamingConfig(max_unwrap=4))
        assert service.registry is not registry

    def test_unpin_resolver(self, service):
        resolver = ChainResolver(ReflectStrategy())
        service.inject_resolver(resolver)
        service.unpin_resolver()

        assert service.resolver is resolver
        service.reconfigure(NamingConfig(max_unwrap=4))
        assert service.resolver is not resolver


class TestHardReset:
    """Whole-snapshot replacement."""

    def test_config_and_builder_are_used(self, service):
        config = NamingConfig(map_prefer_elem=False)
        builder = RecordingBuilder()

        service.hard_reset(config, builder=builder)

        assert service.config == config
        assert service.builder is builder
        assert service.registry is not None
        assert service.resolver is not None
        assert builder.registry_calls[0][0] is config
        assert builder.resolver_calls[0][0] is config
        assert builder.resolver_calls[0][1] is service.registry

    def test_omitted_values(self):
        builder = RecordingBuilder()
        service = NamingService(NamingConfig(max_unwrap=3), builder, extension="old")

        service.hard_reset()

        assert service.config == NamingConfig(max_unwrap=3)
        assert service.builder is builder
        assert service.extension is None

    def test_pins_follow_supplied_layers(self, service):
        registry = TypeRegistry()
        service.hard_reset(registry=registry)
        assert service.registry is registry
        assert service.is_registry_pinned()
        assert not service.is_resolver_pinned()

        resolver = ChainResolver(ReflectStrategy())
        service.hard_reset(resolver=resolver)
        assert service.resolver is resolver
        assert service.is_resolver_pinned()
        assert not service.is_registry_pinned()

    def test_clears_previous_pins(self, service):
        service.pin_registry()
        service.pin_resolver()

        service.hard_reset()

        assert not service.is_registry_pinned()
        assert not service.is_resolver_pinned()

    def test_rebuilt_registry_migrates_entries(self, service):
        service.register_type(User, "domain.user")
        service.hard_reset(NamingConfig(include_builtins=False))
        assert service.resolve(User()) == "domain.user"


class TestNilLayer:
    """A builder returning None aborts the write."""

    @pytest.mark.parametrize("builder_cls", [NilRegistryBuilder, NilResolverBuilder])
    def test_replace_builder_keeps_previous_snapshot(self, service, builder_cls):
        before = service.snapshot

        with pytest.raises(NilLayerError):
            service.replace_builder(builder_cls())

        assert service.snapshot is before

    @pytest.mark.parametrize("builder_cls", [NilRegistryBuilder, NilResolverBuilder])
    def test_hard_reset_keeps_previous_snapshot(self, service, builder_cls):
        before = service.snapshot

        with pytest.raises(NilLayerError):
            service.hard_reset(builder=builder_cls())

        assert service.snapshot is before

    def test_lock_is_released_after_failure(self, service):
        with pytest.raises(NilLayerError):
            service.replace_builder(NilRegistryBuilder())

        service.reconfigure(NamingConfig(max_unwrap=5))
        assert service.config.max_unwrap == 5

    def test_failure_is_logged(self, service):
        with patch("entity_naming.state.service.logger") as mock_logger:
            with pytest.raises(NilLayerError):
                service.replace_builder(NilResolverBuilder())
        mock_logger.error.assert_called_once()
        assert "replace_builder" in mock_logger.error.call_args[0][0]

    @pytest.mark.parametrize("builder_cls", [NilRegistryBuilder, NilResolverBuilder])
    def test_construction_fails(self, builder_cls):
        with pytest.raises(NilLayerError):
            NamingService(builder=builder_cls())

    def test_pinned_layers_are_not_rebuilt_by_failing_builder(self, service):
        service.pin_registry()
        service.pin_resolver()

        service.replace_builder(NilRegistryBuilder())

        assert isinstance(service.builder, NilRegistryBuilder)


class TestConcurrency:
    """Readers never observe a partial snapshot while writers reconfigure."""

    def test_reads_race_reconfigures(self, service):
        service.register_type(Order, "shop.order")
        errors = []
        start = threading.Barrier(9)

        def reader():
            start.wait()
            try:
                for _ in range(10_000):
                    snap = service.snapshot
                    assert snap.registry is not None
                    assert snap.resolver is not None
                    assert service.resolve(User()) == "domain_types.User"
                    assert service.resolve(Order()) == "shop.order"
                    assert service.resolve(1) in ("int", "")
            except Exception as e:  # noqa: BLE001
                errors.append(e)

        def writer():
            start.wait()
            for i in range(20):
                service.reconfigure(NamingConfig(include_builtins=bool(i % 2), max_unwrap=4 + i % 3))

        threads = [threading.Thread(target=reader) for _ in range(8)]
        threads.append(threading.Thread(target=writer))
        for th in threads:
            th.start()
        for th in threads:
            th.join()

        assert errors == []
        assert service.registry.lookup(Order) == ("shop.order", True)

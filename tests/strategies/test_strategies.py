"""Tests for the namer, registry and reflect strategies."""

from typing import Optional, Union
from unittest.mock import patch

import pytest

from entity_naming.base.config import NamingConfig
from entity_naming.strategies import (
    NamerStrategy,
    ReflectStrategy,
    RegistryStrategy,
    name_for_type,
    strip_type_params,
)
from entity_naming.strategies import reflect as reflect_module
from entity_naming.types import TypeDescriptor
from tests.fixtures.domain_types import Account, Box, Order, Record, SelfNamed, User, UserId


class TestNamerStrategy:
    """Self-naming values win; everything else is declined."""

    def test_self_named_value(self, config):
        assert NamerStrategy().try_resolve(SelfNamed(), config) == ("custom.self_named", True)
        assert NamerStrategy().try_resolve(Account(), config) == ("billing.account", True)

    @pytest.mark.parametrize("value", [User(), None, 42, SelfNamed, Record()])
    def test_declines(self, value, config):
        assert NamerStrategy().try_resolve(value, config) == ("", False)

    def test_declines_every_type(self, config):
        assert NamerStrategy().try_resolve_type(SelfNamed, config) == ("", False)


class TestRegistryStrategy:
    """Explicit registrations keyed on the value's runtime type."""

    def test_registered_value_and_type(self, registry, config):
        registry.register(User, "domain.user")
        strategy = RegistryStrategy(registry)

        assert strategy.try_resolve(User(), config) == ("domain.user", True)
        assert strategy.try_resolve_type(list[User], config) == ("domain.user", True)

    def test_unregistered(self, registry, config):
        strategy = RegistryStrategy(registry)
        assert strategy.try_resolve(Order(), config) == ("", False)
        assert strategy.try_resolve_type(Order, config) == ("", False)

    def test_no_registry(self, config):
        strategy = RegistryStrategy(None)
        assert strategy.registry is None
        assert strategy.try_resolve(User(), config) == ("", False)
        assert strategy.try_resolve_type(User, config) == ("", False)

    def test_none_input(self, registry, config):
        strategy = RegistryStrategy(registry)
        assert strategy.try_resolve(None, config) == ("", False)
        assert strategy.try_resolve_type(None, config) == ("", False)


class TestReflectStrategy:
    """Reflective <package>.<Type> names."""

    def test_value_uses_module_segment_and_class_name(self, config):
        assert ReflectStrategy().try_resolve(User(), config) == ("domain_types.User", True)

    @pytest.mark.parametrize(
        "hint, expected",
        [
            (User, "domain_types.User"),
            (Optional[list[User]], "domain_types.User"),
            (dict[str, Order], "domain_types.Order"),
            (Box[int], "domain_types.Box"),
            (UserId, "domain_types.UserId"),
            (int, "int"),
            (list[str], "str"),
        ],
    )
    def test_type_names(self, hint, expected, config):
        assert ReflectStrategy().try_resolve_type(hint, config) == (expected, True)

    def test_builtins_hidden_when_disabled(self):
        config = NamingConfig(include_builtins=False)
        assert ReflectStrategy().try_resolve(42, config) == ("", True)
        assert ReflectStrategy().try_resolve_type(User, config) == ("domain_types.User", True)

    def test_unnamed_type_is_handled_with_empty_name(self, config):
        assert ReflectStrategy().try_resolve_type(Union[User, Order], config) == ("", True)

    def test_too_deep_is_handled_with_empty_name(self):
        config = NamingConfig(max_unwrap=1)
        assert ReflectStrategy().try_resolve_type(list[list[User]], config) == ("", True)

    def test_hand_built_descriptor_without_dots(self, config):
        widget = TypeDescriptor(name="Widget", package="widgets")
        assert ReflectStrategy().try_resolve_type(widget, config) == ("widgets.Widget", True)

    def test_none_is_declined(self, config):
        assert ReflectStrategy().try_resolve(None, config) == ("", False)
        assert ReflectStrategy().try_resolve_type(None, config) == ("", False)

    def test_runtime_containers_resolve_to_builtin(self, config):
        assert ReflectStrategy().try_resolve([User()], config) == ("list", True)


class TestReflectCache:
    """Process-wide memoization of reflective names."""

    def test_repeated_lookups_normalize_once(self):
        class Cached:
            pass

        config = NamingConfig()
        with patch.object(reflect_module, "normalize", wraps=reflect_module.normalize) as spy:
            assert name_for_type(Cached, config) == name_for_type(Cached, config)
            assert spy.call_count == 1

    def test_cache_key_includes_config_knobs(self):
        class Keyed:
            pass

        with patch.object(reflect_module, "normalize", wraps=reflect_module.normalize) as spy:
            name_for_type(Keyed, NamingConfig())
            name_for_type(Keyed, NamingConfig(include_builtins=False))
            name_for_type(Keyed, NamingConfig(max_unwrap=3))
            name_for_type(Keyed, NamingConfig(map_prefer_elem=False))
            assert spy.call_count == 4

    def test_builtin_answers_differ_per_config(self):
        assert name_for_type(float, NamingConfig()) == "float"
        assert name_for_type(float, NamingConfig(include_builtins=False)) == ""


class TestStripTypeParams:
    @pytest.mark.parametrize(
        "name, expected",
        [("Box[int]", "Box"), ("Pair[str, Box[int]]", "Pair"), ("User", "User"), ("", "")],
    )
    def test_strip(self, name, expected):
        assert strip_type_params(name) == expected

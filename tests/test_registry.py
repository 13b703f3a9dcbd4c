"""Tests for bundleref.registry — compiled bundle table and precedence policy."""

import pytest

from bundleref.errors import ConfigurationError
from bundleref.registry.bundles import Bundle, BundleRegistry, compile_bundles

FOO = Bundle("FooBundle", "Acme\\FooBundle")
BAR = Bundle("BarBundle", "Acme\\BarBundle")
FOO_OVERRIDE = Bundle("AppFooBundle", "App\\FooBundle")


class TestBundle:
    def test_fields(self) -> None:
        assert FOO.name == "FooBundle"
        assert FOO.namespace == "Acme\\FooBundle"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            FOO.name = "Other"  # type: ignore[misc]

    @pytest.mark.parametrize(("name", "namespace"), [("", "Acme\\FooBundle"), ("FooBundle", "")])
    def test_requires_name_and_namespace(self, name: str, namespace: str) -> None:
        with pytest.raises(ConfigurationError, match="non-empty name and namespace"):
            Bundle(name, namespace)


class TestBundleRegistry:
    def test_lookup_registered_under_own_name(self) -> None:
        registry = compile_bundles([FOO, BAR])
        assert registry.lookup("FooBundle") == (FOO,)

    def test_lookup_unknown_is_empty(self) -> None:
        registry = compile_bundles([FOO])
        assert registry.lookup("Nope") == ()
        assert registry.get("Nope") is None

    def test_last_registered_wins(self) -> None:
        registry = compile_bundles([FOO, ("FooBundle", FOO_OVERRIDE)])
        assert registry.lookup("FooBundle") == (FOO_OVERRIDE, FOO)
        assert registry.get("FooBundle") is FOO_OVERRIDE
        assert registry.list_all()["FooBundle"] is FOO_OVERRIDE

    def test_list_all_keeps_first_registration_order(self) -> None:
        registry = compile_bundles([FOO, BAR, ("FooBundle", FOO_OVERRIDE)])
        assert list(registry.list_all()) == ["FooBundle", "BarBundle"]

    def test_list_all_is_read_only(self) -> None:
        registry = compile_bundles([FOO])
        with pytest.raises(TypeError):
            registry.list_all()["BarBundle"] = BAR  # type: ignore[index]

    def test_container_protocol(self) -> None:
        registry = compile_bundles([FOO, BAR])
        assert len(registry) == 2
        assert "FooBundle" in registry
        assert "Nope" not in registry
        assert list(registry) == ["FooBundle", "BarBundle"]

    def test_empty(self) -> None:
        registry = BundleRegistry()
        assert len(registry) == 0
        assert registry.list_all() == {}


class TestCompileBundles:
    def test_duplicate_registration(self) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate bundle registration"):
            compile_bundles([FOO, FOO])

    def test_same_bundle_under_two_aliases(self) -> None:
        registry = compile_bundles([FOO, ("LegacyFooBundle", FOO)])
        assert registry.get("LegacyFooBundle") is FOO

    @pytest.mark.parametrize(
        "item",
        [
            ("", FOO),
            ("Foo:Bundle", FOO),
            Bundle("Foo:Bundle", "Acme\\FooBundle"),
        ],
    )
    def test_invalid(self, item: Bundle | tuple[str, Bundle]) -> None:
        with pytest.raises(ConfigurationError):
            compile_bundles([item])

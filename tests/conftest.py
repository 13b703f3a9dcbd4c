"""Shared fixtures: the reference bundle layout used across resolver tests."""

import pytest

from bundleref.registry.bundles import Bundle, BundleRegistry, compile_bundles
from bundleref.resolver import NameResolver

FOO = Bundle("FooBundle", "TestBundle\\FooBundle")
FOOOOO = Bundle("FoooooBundle", "TestBundle\\FooBundle")
FABPOT = Bundle("FabpotFooBundle", "TestBundle\\Fabpot\\FooBundle")
SENSIO = Bundle("SensioFooBundle", "TestBundle\\Sensio\\FooBundle")
SENSIO_CMS = Bundle("SensioCmsFooBundle", "TestBundle\\Sensio\\Cms\\FooBundle")


@pytest.fixture
def registry() -> BundleRegistry:
    """FabpotFooBundle is registered after SensioFooBundle under the
    ``SensioFooBundle`` alias, so it overrides it."""
    return compile_bundles([
        FOOOOO,
        FOO,
        FABPOT,
        SENSIO,
        ("SensioFooBundle", FABPOT),
        SENSIO_CMS,
    ])


@pytest.fixture
def resolver(registry: BundleRegistry) -> NameResolver:
    return NameResolver(registry)

"""Bundle registry — the alias table the resolver reads from.

Hosts may supply any object matching the ``Registry`` protocol;
``BundleRegistry`` is the in-memory implementation.
"""

from bundleref.registry.bundles import Bundle, BundleRegistry, compile_bundles
from bundleref.registry.protocol import Module, Registry

__all__ = ["Bundle", "BundleRegistry", "Module", "Registry", "compile_bundles"]

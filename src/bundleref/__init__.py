"""bundleref — short handler notation for bundle-based web frameworks.

Translates ``Bundle:Controller:Action`` strings into fully-qualified
``Type::methodAction`` handler references and back, using the host's
bundle registry.

Basic usage::

    from bundleref import Bundle, NameResolver, compile_bundles

    registry = compile_bundles([Bundle("FooBundle", "Acme\\FooBundle")])
    resolver = NameResolver(registry)

    resolver.parse("FooBundle:Default:index")
    # Acme\\FooBundle\\Controller\\DefaultController::indexAction
"""

__version__ = "0.1.0"
__all__ = [
    "Bundle",
    "BundleRefError",
    "BundleRegistry",
    "ConfigurationError",
    "FullReference",
    "HandlerNotFoundError",
    "MalformedReferenceError",
    "NameResolver",
    "ResolutionError",
    "ResolverConfig",
    "ShortReference",
    "UnknownModuleError",
    "UnresolvableModuleError",
    "compile_bundles",
    "suggest_alternative",
]

_ERRORS = frozenset({
    "BundleRefError",
    "ConfigurationError",
    "HandlerNotFoundError",
    "MalformedReferenceError",
    "ResolutionError",
    "UnknownModuleError",
    "UnresolvableModuleError",
})


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import bundleref`` fast while providing a clean top-level API.
    """
    if name == "NameResolver":
        from bundleref.resolver import NameResolver

        return NameResolver

    if name == "ResolverConfig":
        from bundleref.config import ResolverConfig

        return ResolverConfig

    if name in ("Bundle", "BundleRegistry", "compile_bundles"):
        from bundleref.registry import bundles as _bundles

        return getattr(_bundles, name)

    if name in ("FullReference", "ShortReference"):
        from bundleref import references as _refs

        return getattr(_refs, name)

    if name == "suggest_alternative":
        from bundleref.suggest import suggest_alternative

        return suggest_alternative

    if name in _ERRORS:
        from bundleref import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

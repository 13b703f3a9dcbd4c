"""Name resolution — translates short handler notation to and from full references.

``NameResolver`` sits on top of a host's bundle registry::

    resolver = NameResolver(registry)
    resolver.parse("FooBundle:Default:index")
    # FullReference("TestBundle\\FooBundle\\Controller\\DefaultController", "indexAction")
    resolver.build("TestBundle\\FooBundle\\Controller\\DefaultController::indexAction")
    # "FooBundle:Default:index"

Both directions are pure functions of their input and the registry
snapshot.  Failures raise ``ResolutionError`` subclasses; nothing is
retried or recovered here.
"""

import logging
from collections.abc import Callable

from bundleref.config import ResolverConfig
from bundleref.errors import HandlerNotFoundError, UnknownModuleError, UnresolvableModuleError
from bundleref.references import FullReference, ShortReference, parse_full, parse_short
from bundleref.registry.protocol import Module, Registry
from bundleref.suggest import suggest_alternative

logger = logging.getLogger("bundleref.resolver")


class NameResolver:
    """Bidirectional translator between ``a:b:c`` and ``Type::method`` strings.

    Args:
        registry: Read-only bundle registry (see ``Registry``).
        config: Naming conventions. Defaults to ``ResolverConfig()``.
        handler_exists: Optional predicate called with a candidate type
            name.  When given, ``parse()`` tries the bundles registered
            under an alias in precedence order and returns the first whose
            handler type exists.  Without it, the highest-precedence bundle
            wins unconditionally.
    """

    __slots__ = ("_config", "_handler_exists", "_registry")

    def __init__(
        self,
        registry: Registry,
        config: ResolverConfig | None = None,
        *,
        handler_exists: Callable[[str], bool] | None = None,
    ) -> None:
        self._registry = registry
        self._config = config or ResolverConfig()
        self._handler_exists = handler_exists

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def parse(self, short_ref: str) -> FullReference:
        """Convert a short ``a:b:c`` notation string to a FullReference.

        Raises:
            MalformedReferenceError: If the string is not an ``a:b:c`` string.
            UnknownModuleError: If the alias is not registered.
            HandlerNotFoundError: If ``handler_exists`` rejects every candidate.
        """
        short = parse_short(short_ref, self._config)
        candidates = self._registry.lookup(short.alias)
        if not candidates:
            raise self._unknown_module(short, short_ref)

        tried: list[tuple[str, str]] = []
        for module in candidates:
            full = self._full_reference(module, short)
            if self._handler_exists is None or self._handler_exists(full.type_name):
                logger.debug("Resolved %s -> %s (bundle %s)", short_ref, full, module.name)
                return full
            tried.append((module.name, full.type_name))

        raise HandlerNotFoundError(reference=short_ref, tried=tuple(tried))

    def build(self, full_ref: str | FullReference) -> str:
        """Convert a ``Type::methodAction`` string back to short notation.

        When several bundle namespaces prefix the type name, the longest
        (most specific) one wins; equal namespaces resolve to the bundle
        listed first by the registry.  Bundles overridden under their alias
        still own their namespace.

        Raises:
            MalformedReferenceError: If the naming conventions are not met.
            UnresolvableModuleError: If no bundle owns the type's namespace.
        """
        reference = str(full_ref)
        full = parse_full(reference, self._config)

        owner = self._owning_module(full.type_name)
        if owner is None:
            raise UnresolvableModuleError(reference=reference)
        module, prefix = owner

        short = ShortReference(
            alias=module.name,
            sub_path=full.type_name[len(prefix) : -len(self._config.type_suffix)],
            action=full.method[: -len(self._config.action_suffix)],
        )
        logger.debug("Built %s -> %s", reference, short)
        return str(short)

    # -- helpers --

    def _controller_prefix(self, module: Module) -> str:
        sep = self._config.namespace_separator
        return f"{module.namespace.rstrip(sep)}{sep}{self._config.controller_namespace}{sep}"

    def _full_reference(self, module: Module, short: ShortReference) -> FullReference:
        return FullReference(
            type_name=f"{self._controller_prefix(module)}{short.sub_path}{self._config.type_suffix}",
            method=f"{short.action}{self._config.action_suffix}",
        )

    def _registered_modules(self) -> list[Module]:
        """Every registered module, overridden ones included, in alias order."""
        modules: list[Module] = []
        seen: set[int] = set()
        for alias in self._registry.list_all():
            for module in self._registry.lookup(alias):
                if id(module) not in seen:
                    seen.add(id(module))
                    modules.append(module)
        return modules

    def _owning_module(self, type_name: str) -> tuple[Module, str] | None:
        best: tuple[Module, str] | None = None
        for module in self._registered_modules():
            prefix = self._controller_prefix(module)
            if not type_name.startswith(prefix):
                continue
            if best is None or len(prefix) > len(best[1]):
                best = (module, prefix)
        return best

    def _unknown_module(self, short: ShortReference, reference: str) -> UnknownModuleError:
        suggestion = suggest_alternative(
            short.alias,
            self._registry.list_all().keys(),
            max_distance_ratio=self._config.max_distance_ratio,
        )
        suggested = None
        if suggestion is not None:
            suggested = str(ShortReference(suggestion, short.sub_path, short.action))
        logger.debug("Unknown bundle %r in %s (suggestion: %s)", short.alias, reference, suggestion)
        return UnknownModuleError(
            reference=reference,
            alias=short.alias,
            suggestion=suggestion,
            suggested_reference=suggested,
        )

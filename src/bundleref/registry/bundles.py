"""Bundle registry — compiled alias table with override precedence.

Mirrors a compiled lookup table: ``Bundle`` is the frozen definition,
``BundleRegistry`` is the compiled table built once by ``compile_bundles()``.

Precedence policy:
    Last registered wins.  When several bundles are registered under the
    same alias, the most recent registration overrides the earlier ones,
    so ``lookup()`` returns newest first and ``list_all()`` maps the alias
    to the newest bundle.  Aliases keep their first-registration order.

Free-threading safety:
    - Bundle is a frozen dataclass (immutable)
    - BundleRegistry tables are built at compile time, never mutated
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from bundleref.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Bundle:
    """A frozen bundle definition: a short name plus the namespace it owns."""

    name: str
    namespace: str

    def __post_init__(self) -> None:
        if not self.name or not self.namespace:
            msg = f"Bundle {self!r} must have a non-empty name and namespace."
            raise ConfigurationError(msg)


class BundleRegistry:
    """Compiled bundle table. Created once, immutable afterwards.

    Satisfies the ``Registry`` protocol consumed by ``NameResolver``.
    """

    __slots__ = ("_by_alias", "_primary")

    def __init__(self, entries: Iterable[tuple[str, Bundle]] = ()) -> None:
        grouped: dict[str, list[Bundle]] = {}
        for alias, bundle in entries:
            grouped.setdefault(alias, []).append(bundle)

        # Newest registration first
        self._by_alias: dict[str, tuple[Bundle, ...]] = {
            alias: tuple(reversed(bundles)) for alias, bundles in grouped.items()
        }
        self._primary: Mapping[str, Bundle] = MappingProxyType(
            {alias: bundles[0] for alias, bundles in self._by_alias.items()}
        )

    def lookup(self, alias: str) -> tuple[Bundle, ...]:
        """Bundles registered under *alias*, highest precedence first.

        Returns an empty tuple for unknown aliases.
        """
        return self._by_alias.get(alias, ())

    def list_all(self) -> Mapping[str, Bundle]:
        """Read-only alias -> winning bundle mapping, in registration order."""
        return self._primary

    def get(self, alias: str) -> Bundle | None:
        """The winning bundle for *alias*. Returns ``None`` if not registered."""
        return self._primary.get(alias)

    def __len__(self) -> int:
        return len(self._primary)

    def __contains__(self, alias: object) -> bool:
        return alias in self._primary

    def __iter__(self) -> Iterator[str]:
        return iter(self._primary)


def compile_bundles(pending: Iterable[Bundle | tuple[str, Bundle]]) -> BundleRegistry:
    """Compile bundle registrations into a frozen BundleRegistry.

    Each item is either a ``Bundle`` (registered under its own name) or an
    ``(alias, bundle)`` tuple.  Order matters: later registrations of an
    alias override earlier ones.  Validation happens here so errors
    surface at startup, not while resolving.
    """
    entries: list[tuple[str, Bundle]] = []
    seen: set[tuple[str, Bundle]] = set()

    for item in pending:
        alias, bundle = (item.name, item) if isinstance(item, Bundle) else item
        if not alias:
            msg = f"Bundle alias must not be empty (bundle {bundle.name!r})."
            raise ConfigurationError(msg)
        if ":" in alias or ":" in bundle.name:
            msg = f"Bundle alias {alias!r} and name {bundle.name!r} must not contain ':'."
            raise ConfigurationError(msg)
        if (alias, bundle) in seen:
            msg = f"Duplicate bundle registration: {bundle.name!r} under alias {alias!r}"
            raise ConfigurationError(msg)
        seen.add((alias, bundle))
        entries.append((alias, bundle))

    return BundleRegistry(entries)

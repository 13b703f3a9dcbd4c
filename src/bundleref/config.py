"""Resolver configuration.

ResolverConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from bundleref.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Naming conventions used to translate references. Immutable after creation.

    The defaults describe the conventional bundle layout, where
    ``FooBundle:Default:index`` maps to
    ``<namespace>\\Controller\\DefaultController::indexAction``.
    Override what you need::

        config = ResolverConfig(namespace_separator=".", path_separators=("/", "."))
    """

    # Type names
    namespace_separator: str = "\\"
    path_separators: tuple[str, ...] = ("/", "\\")  # Accepted in the sub-path segment
    controller_namespace: str = "Controller"

    # Suffixes
    type_suffix: str = "Controller"
    action_suffix: str = "Action"

    # Suggestions — edit-distance cutoff as a fraction of the unknown alias length
    max_distance_ratio: float = 1 / 3

    def __post_init__(self) -> None:
        if not self.namespace_separator:
            msg = "namespace_separator must not be empty."
            raise ConfigurationError(msg)
        if not self.path_separators or not all(self.path_separators):
            msg = "path_separators must contain at least one non-empty separator."
            raise ConfigurationError(msg)
        for sep in (self.namespace_separator, *self.path_separators):
            if ":" in sep:
                msg = f"Separator {sep!r} must not contain ':' (reserved by the notation)."
                raise ConfigurationError(msg)
        for field_name in ("controller_namespace", "type_suffix", "action_suffix"):
            if not getattr(self, field_name):
                msg = f"{field_name} must not be empty."
                raise ConfigurationError(msg)
        if not 0 <= self.max_distance_ratio <= 1:
            msg = f"max_distance_ratio must be between 0 and 1, got {self.max_distance_ratio!r}."
            raise ConfigurationError(msg)

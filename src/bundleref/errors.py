"""bundleref exception hierarchy.

Shared across the registry, the reference parsers, and the resolver so
every module raises and catches the same types.  Routing layers map
``ResolutionError`` subclasses onto their own "bad request" / "not found"
responses.
"""

from dataclasses import dataclass, fields


class BundleRefError(Exception):
    """Base for all bundleref-specific errors."""


class ConfigurationError(BundleRefError):
    """Raised when resolver configuration or a bundle definition is invalid.

    Typically surfaces when a ``ResolverConfig`` is created or when
    ``compile_bundles()`` builds the registry at startup.
    """


@dataclass(slots=True, eq=False)
class ResolutionError(BundleRefError):
    """A reference that could not be translated.

    ``reference`` is always the string exactly as the caller passed it.
    Instances stay mutable so tracebacks and notes can be attached while
    they propagate.
    """

    reference: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return self.detail
        return f'Unable to resolve "{self.reference}".'

    def __reduce__(self) -> tuple[type, tuple[object, ...]]:
        # Fields live in slots, not in args or __dict__
        return type(self), tuple(getattr(self, f.name) for f in fields(self))


@dataclass(slots=True, eq=False)
class MalformedReferenceError(ResolutionError):
    """The reference does not have the expected shape.

    ``expected`` names the notation that was required, e.g. ``"a:b:c"``
    or ``"aController::cAction"``.
    """

    expected: str = ""

    def __str__(self) -> str:
        msg = f'The "{self.reference}" reference is not a valid "{self.expected}" string.'
        if self.detail:
            msg = f"{msg} {self.detail}"
        return msg


@dataclass(slots=True, eq=False)
class UnknownModuleError(ResolutionError):
    """The bundle alias of a short reference is not registered.

    Carries the best alternative alias (if any) and the short reference
    rewritten to use it, so callers can render their own hint.
    """

    alias: str = ""
    suggestion: str | None = None
    suggested_reference: str | None = None

    def __str__(self) -> str:
        msg = (
            f'The "{self.alias}" bundle (from the "{self.reference}" reference) '
            f"does not exist or is not registered."
        )
        if self.suggested_reference:
            msg += f' Did you mean "{self.suggested_reference}"?'
        return msg


@dataclass(slots=True, eq=False)
class UnresolvableModuleError(ResolutionError):
    """No registered bundle namespace owns a fully-qualified type name."""

    def __str__(self) -> str:
        return f'Unable to find a bundle that defines handler "{self.reference}".'


@dataclass(slots=True, eq=False)
class HandlerNotFoundError(ResolutionError):
    """The alias resolved, but none of the candidate handler types exist.

    ``tried`` holds ``(bundle_name, type_name)`` pairs in the order they
    were checked.
    """

    tried: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if len(self.tried) == 1:
            _, type_name = self.tried[0]
            return (
                f'The "{self.reference}" reference maps to a "{type_name}" class, '
                f"but this class was not found. Create this class or check the "
                f"spelling of the class and its namespace."
            )
        names = ", ".join(name for name, _ in self.tried)
        handler = self.reference.rpartition(":")[0]
        return f'Unable to find handler "{handler}" in bundles {names}.'

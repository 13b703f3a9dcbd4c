"""ShortReference and FullReference frozen dataclasses, plus their parsers.

Short notation:  ``FooBundle:Sub/Default:index``
Full notation:   ``TestBundle\\FooBundle\\Controller\\Sub\\DefaultController::indexAction``
"""

import re
from dataclasses import dataclass

from bundleref.config import ResolverConfig
from bundleref.errors import MalformedReferenceError

SHORT_NOTATION = "a:b:c"
FULL_NOTATION = "aController::cAction"


@dataclass(frozen=True, slots=True)
class ShortReference:
    """A parsed ``alias:sub_path:action`` reference.

    ``sub_path`` is stored with its separators normalized to the
    configured namespace separator.
    """

    alias: str
    sub_path: str
    action: str

    def __str__(self) -> str:
        return f"{self.alias}:{self.sub_path}:{self.action}"


@dataclass(frozen=True, slots=True)
class FullReference:
    """A fully-qualified handler: type name plus method name."""

    type_name: str
    method: str

    def __str__(self) -> str:
        return f"{self.type_name}::{self.method}"


def _split_path(path: str, separators: tuple[str, ...]) -> list[str]:
    pattern = "|".join(re.escape(sep) for sep in separators)
    return re.split(pattern, path)


def parse_short(reference: str, config: ResolverConfig) -> ShortReference:
    """Parse a short ``a:b:c`` string into a ShortReference.

    Examples::

        "FooBundle:Default:index"      -> ShortReference("FooBundle", "Default", "index")
        "FooBundle:Test/Default:index" -> ShortReference("FooBundle", "Test\\Default", "index")

    Raises:
        MalformedReferenceError: If the string does not have exactly three
            non-empty colon-delimited segments, or the sub-path has an
            empty component.
    """
    parts = reference.split(":")
    if len(parts) != 3 or not all(parts):
        raise MalformedReferenceError(reference=reference, expected=SHORT_NOTATION)

    alias, sub_path, action = parts
    components = _split_path(sub_path, config.path_separators)
    if not all(components):
        raise MalformedReferenceError(
            reference=reference,
            expected=SHORT_NOTATION,
            detail=f'The "{sub_path}" segment contains an empty path component.',
        )
    return ShortReference(
        alias=alias,
        sub_path=config.namespace_separator.join(components),
        action=action,
    )


def parse_full(reference: str, config: ResolverConfig) -> FullReference:
    """Parse and validate a ``TypeName::methodName`` string.

    The method must end in the action suffix, the last component of the
    type name must end in the type suffix, and the type name must contain
    the controller namespace segment.

    Raises:
        MalformedReferenceError: If any of those conventions is broken.
    """
    parts = reference.split("::")
    if len(parts) != 2 or not all(parts):
        raise MalformedReferenceError(reference=reference, expected=FULL_NOTATION)

    type_name, method = parts
    if len(method) <= len(config.action_suffix) or not method.endswith(config.action_suffix):
        raise MalformedReferenceError(
            reference=reference,
            expected=FULL_NOTATION,
            detail=f'The method name must end with "{config.action_suffix}".',
        )

    components = type_name.split(config.namespace_separator)
    if not all(components):
        raise MalformedReferenceError(
            reference=reference,
            expected=FULL_NOTATION,
            detail=f'The "{type_name}" type name contains an empty namespace component.',
        )
    bare = components[-1]
    if len(bare) <= len(config.type_suffix) or not bare.endswith(config.type_suffix):
        raise MalformedReferenceError(
            reference=reference,
            expected=FULL_NOTATION,
            detail=f'The type name must end with "{config.type_suffix}".',
        )
    if config.controller_namespace not in components[:-1]:
        raise MalformedReferenceError(
            reference=reference,
            expected=FULL_NOTATION,
            detail=f'The type name must live in a "{config.controller_namespace}" namespace.',
        )
    return FullReference(type_name=type_name, method=method)

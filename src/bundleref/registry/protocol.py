"""Registry and Module protocols.

The resolver only reads from the host's bundle registry.  Anything
matching these shapes works::

    class Kernel:
        def lookup(self, alias: str) -> Sequence[Module]: ...
        def list_all(self) -> Mapping[str, Module]: ...

No base class required. The resolver checks the shape, not the lineage.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol


class Module(Protocol):
    """A named, namespaced bundle owned by the host."""

    @property
    def name(self) -> str: ...

    @property
    def namespace(self) -> str: ...


class Registry(Protocol):
    """Read-only view of the host's bundles.

    ``lookup()`` returns every module registered under an alias in
    precedence order (the first entry wins) and an empty sequence for
    unknown aliases.  ``list_all()`` maps each alias to its winning
    module, in registration order.
    """

    def lookup(self, alias: str) -> Sequence[Module]: ...

    def list_all(self) -> Mapping[str, Module]: ...

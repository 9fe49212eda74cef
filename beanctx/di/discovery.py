"""Discovery provider interface and a static, table-driven implementation."""

from typing import Iterable, List, Protocol, Tuple, runtime_checkable

from .decorators import bean_name_for

Discovered = List[Tuple[str, type]]


@runtime_checkable
class DiscoveryProvider(Protocol):
    """Enumerates the injectable types of a namespace.

    Implementations must return pairs in a deterministic order; the order
    becomes the registry's registration order.
    """

    def discover(self, namespace: str) -> Discovered:
        """Return ``(bean_name, type)`` pairs for a namespace."""
        ...


class StaticDiscoveryProvider:
    """Discovery provider backed by a fixed list of types.

    The namespace is ignored; names are derived from the types.
    """

    def __init__(self, types: Iterable[type]):
        self._types = list(types)

    def discover(self, namespace: str) -> Discovered:
        return [(bean_name_for(t), t) for t in self._types]

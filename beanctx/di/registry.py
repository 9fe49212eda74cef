"""Definition registry: the ordered name -> definition table.

The registry is populated once during context initialization and frozen
afterwards, at which point it is safe for unsynchronized concurrent reads.
Iteration follows registration order, which is also the tie-break for
type lookups: the first registered assignable definition wins.
"""

import inspect
from threading import Lock
from typing import Any, Dict, Iterator, List, Optional

from loguru import logger

from ..errors import DuplicateName, RegistryFrozen, type_name
from .definitions import BeanDefinition


def is_assignable(implementation: type, required: Any) -> bool:
    """Check if implementation is assignable to a required type.

    Covers subclasses, ABC virtual subclasses, nominal Protocol inheritance
    and runtime-checkable Protocols.
    """
    if not inspect.isclass(required):
        return False
    if required in getattr(implementation, "__mro__", ()):
        return True
    try:
        return issubclass(implementation, required)
    except TypeError:
        # Plain Protocols and data protocols refuse issubclass()
        return False


class DefinitionRegistry:
    """Registry of bean definitions keyed by name."""

    def __init__(self):
        """Initialize an empty, writable registry."""
        self._definitions: Dict[str, BeanDefinition] = {}
        self._frozen = False
        self._lock = Lock()

    def register(self, name: str, bean_type: type) -> BeanDefinition:
        """Register a bean definition.

        Args:
            name: Bean name
            bean_type: Constructible class

        Returns:
            The stored definition

        Raises:
            DuplicateName: If the name is already registered
            RegistryFrozen: If the registry was frozen
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozen(name)
            existing = self._definitions.get(name)
            if existing is not None:
                raise DuplicateName(name, existing=existing.type, duplicate=bean_type)

            definition = BeanDefinition(name=name, type=bean_type)
            self._definitions[name] = definition

        logger.debug(f"Registered bean definition: {name} -> {type_name(bean_type)}")
        return definition

    def freeze(self) -> None:
        """Make the registry read-only."""
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup_by_name(self, name: str) -> Optional[BeanDefinition]:
        """Get a definition by bean name, or None."""
        return self._definitions.get(name)

    def lookup_assignable_to(self, required: Any) -> Optional[BeanDefinition]:
        """Find the first registered definition assignable to a type.

        Args:
            required: The required type

        Returns:
            First assignable definition in registration order, or None
        """
        candidates = self.lookup_all_assignable_to(required)
        if not candidates:
            return None
        if len(candidates) > 1:
            logger.debug(
                f"{len(candidates)} beans satisfy {type_name(required)}; "
                f"using first registered '{candidates[0].name}' over "
                f"{[c.name for c in candidates[1:]]}"
            )
        return candidates[0]

    def lookup_all_assignable_to(self, required: Any) -> List[BeanDefinition]:
        """List every definition assignable to a type, in registration order."""
        return [
            definition for definition in self._definitions.values()
            if is_assignable(definition.type, required)
        ]

    def names(self) -> List[str]:
        """List registered names in registration order."""
        return list(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[BeanDefinition]:
        return iter(list(self._definitions.values()))

    def __len__(self) -> int:
        return len(self._definitions)

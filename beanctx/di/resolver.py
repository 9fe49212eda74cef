"""Bean resolution: constructor injection with singleton caching.

Type-based lookups always funnel through name-based resolution, so every
bean, whether requested by name or injected as a dependency, is built at
most once and shared through the singleton cache.
"""

import threading
from typing import Any, Optional, Tuple, Type, TypeVar

from loguru import logger

from ..errors import (
    BeanContextError,
    CircularDependency,
    ConstructionFailed,
    ContextClosed,
    NoSatisfyingType,
    NoSuchBean,
)
from .cache import SingletonCache
from .constructors import USE_DEFAULT, has_default, select_constructor
from .definitions import BeanDefinition
from .registry import DefinitionRegistry

T = TypeVar("T")

Chain = Tuple[str, ...]


class Resolver:
    """Resolves beans by name or type against a registry.

    Construction is serialized by a single re-entrant lock, which gives
    compute-once semantics per name: concurrent callers for the same
    unresolved bean wait for the first construction and share its result.
    Cache hits do not take the lock.

    Constructors may resolve further beans on their own thread; those calls
    continue the thread's active resolution chain, so cycles through such
    lookups are detected too. A constructor must not wait on another thread
    that resolves an uncached bean from the same context: that thread blocks
    on the lock the constructor holds, and the two deadlock even when the
    beans are unrelated.
    """

    def __init__(self, registry: DefinitionRegistry, cache: SingletonCache):
        """Initialize the resolver.

        Args:
            registry: Populated definition registry
            cache: Singleton store owned by the same context
        """
        self._registry = registry
        self._cache = cache
        self._lock = threading.RLock()
        self._local = threading.local()
        self._closed = False

    def resolve(self, name: str) -> Any:
        """Resolve a bean by name.

        Args:
            name: Bean name

        Returns:
            The cached or newly constructed instance

        Raises:
            NoSuchBean: If the name is not registered
            NoSatisfyingType: If a constructor parameter cannot be satisfied
            CircularDependency: If the bean transitively requires itself
            ConstructionFailed: If the constructor raised
            InvalidConstructor: If no usable constructor is declared
        """
        return self._resolve(name, self._active_chain())

    def resolve_by_type(self, required: Type[T]) -> T:
        """Resolve the first registered bean assignable to a type.

        Raises:
            NoSatisfyingType: If no definition is assignable to the type
        """
        return self._resolve_by_type(required, self._active_chain(), required_by=None)

    def close(self) -> None:
        """Drop every cached bean and refuse further construction.

        Waits for a construction in progress on another thread to finish.
        """
        with self._lock:
            self._closed = True
            self._cache.clear()

    def _active_chain(self) -> Chain:
        return getattr(self._local, "chain", ())

    def _resolve(self, name: str, chain: Chain) -> Any:
        instance = self._cache.get(name)
        if instance is not None:
            logger.debug(f"Cache hit for bean '{name}'")
            return instance

        definition = self._registry.lookup_by_name(name)
        if definition is None:
            raise NoSuchBean(name)

        if name in chain:
            raise CircularDependency(chain + (name,))

        with self._lock:
            if self._closed:
                raise ContextClosed()

            # Another thread may have finished while we waited
            instance = self._cache.get(name)
            if instance is not None:
                return instance

            instance = self._construct(definition, chain + (name,))
            return self._cache.put(name, instance)

    def _resolve_by_type(self, required: Any, chain: Chain, required_by: Any) -> Any:
        definition = self._registry.lookup_assignable_to(required)
        if definition is None:
            raise NoSatisfyingType(required, required_by=required_by)
        return self._resolve(definition.name, chain)

    def _resolve_argument(self, param, param_type: Optional[type], chain: Chain, bean_type: type) -> Any:
        if param_type is None:
            return USE_DEFAULT
        if has_default(param) and self._registry.lookup_assignable_to(param_type) is None:
            return USE_DEFAULT
        return self._resolve_by_type(param_type, chain, required_by=bean_type)

    def _construct(self, definition: BeanDefinition, chain: Chain) -> Any:
        bean_type = definition.type
        chosen = select_constructor(bean_type)

        arguments = [
            self._resolve_argument(param, param_type, chain, bean_type)
            for param, param_type in zip(chosen.parameters, chosen.parameter_types())
        ]

        previous = self._active_chain()
        self._local.chain = chain
        try:
            instance = chosen.invoke(arguments)
        except BeanContextError:
            raise
        except Exception as e:
            raise ConstructionFailed(bean_type, e) from e
        finally:
            self._local.chain = previous

        logger.debug(
            f"Constructed bean '{definition.name}' via {bean_type.__qualname__}.{chosen.name} "
            f"with {sum(a is not USE_DEFAULT for a in arguments)} dependencies"
        )
        return instance

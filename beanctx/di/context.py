"""Application context: the container API.

An :class:`ApplicationContext` owns its registry and singleton store;
contexts never share state, so several can coexist (e.g. one per test).

Example:
    context = ApplicationContext("app.components")
    context.init()
    service = context.gen_bean("orderService", OrderService)
"""

from pathlib import Path
from threading import Lock
from typing import Any, List, Optional, Type, TypeVar, overload

from loguru import logger

from ..config import BeanContextSettings, ConfigurationManager
from ..errors import ConfigurationError, ContextClosed, TypeMismatch
from .cache import SingletonCache
from .definitions import BeanDefinition
from .discovery import DiscoveryProvider
from .registry import DefinitionRegistry
from .resolver import Resolver
from .scanner import ComponentScanner

T = TypeVar("T")


class ApplicationContext:
    """Dependency injection container populated from component discovery.

    Provides:
    - One-time registry population from a discovery provider
    - Name- and type-based bean resolution with constructor injection
    - Singleton caching for the context's lifetime
    """

    def __init__(
        self,
        base_package: Optional[str] = None,
        *,
        discovery: Optional[DiscoveryProvider] = None,
        settings: Optional[BeanContextSettings] = None,
    ):
        """Initialize the context.

        Args:
            base_package: Dotted package to scan; defaults to settings.base_package
            discovery: Discovery provider; defaults to a ComponentScanner
                configured from settings
            settings: Context settings; defaults to environment-only settings

        Raises:
            ConfigurationError: If no base package is given or configured
        """
        self.settings = settings or BeanContextSettings()
        self.base_package = base_package or self.settings.base_package
        if not self.base_package:
            raise ConfigurationError.missing_base_package()

        self.discovery = discovery or ComponentScanner(
            strict=self.settings.discovery.strict,
            exclude=self.settings.discovery.exclude,
        )

        self._registry = DefinitionRegistry()
        self._cache = SingletonCache()
        self._resolver = Resolver(self._registry, self._cache)
        self._init_lock = Lock()
        self._initialized = False
        self._closed = False

    @classmethod
    def from_config(
        cls,
        config_path: Optional[Path] = None,
        *,
        base_package: Optional[str] = None,
        discovery: Optional[DiscoveryProvider] = None,
    ) -> "ApplicationContext":
        """Create a context from hierarchical configuration.

        Args:
            config_path: Optional explicit configuration file
            base_package: Overrides the configured base package
            discovery: Optional discovery provider
        """
        settings = ConfigurationManager(command_config_path=config_path).load_settings()
        return cls(base_package, discovery=discovery, settings=settings)

    def init(self) -> None:
        """Populate the registry from the discovery provider.

        Calling it again is a no-op. If population fails the context stays
        uninitialized and empty, so the call can be retried.
        """
        with self._init_lock:
            self._ensure_open()
            if self._initialized:
                logger.debug(f"Context for {self.base_package} already initialized")
                return

            registry = DefinitionRegistry()
            for name, bean_type in self.discovery.discover(self.base_package):
                registry.register(name, bean_type)
            registry.freeze()

            self._registry = registry
            self._resolver = Resolver(registry, self._cache)
            self._initialized = True

        logger.info(f"Initialized context for {self.base_package} with {len(registry)} bean definitions")

    @overload
    def gen_bean(self, name: str) -> Any: ...

    @overload
    def gen_bean(self, name: str, expected_type: Type[T]) -> T: ...

    def gen_bean(self, name: str, expected_type: Optional[type] = None) -> Any:
        """Get the cached or newly constructed bean for a name.

        Args:
            name: Bean name
            expected_type: If given, the bean must be an instance of this type

        Returns:
            The shared bean instance

        Raises:
            NoSuchBean: If the name is not registered
            TypeMismatch: If the bean is not an instance of expected_type
            ContextClosed: If the context was closed
        """
        instance = self._ready_resolver().resolve(name)
        if expected_type is not None and not isinstance(instance, expected_type):
            raise TypeMismatch(name, expected_type, type(instance))
        return instance

    def get_bean(self, required_type: Type[T]) -> T:
        """Get the first registered bean assignable to a type.

        Raises:
            NoSatisfyingType: If no registered bean is assignable
        """
        return self._ready_resolver().resolve_by_type(required_type)

    def contains_bean(self, name: str) -> bool:
        self._ensure_initialized()
        return name in self._registry

    def get_definition(self, name: str) -> Optional[BeanDefinition]:
        self._ensure_initialized()
        return self._registry.lookup_by_name(name)

    def bean_names(self) -> List[str]:
        """List registered bean names in registration order."""
        self._ensure_initialized()
        return self._registry.names()

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def singleton_count(self) -> int:
        return len(self._cache)

    def close(self) -> None:
        """Dispose of the context, dropping every cached singleton."""
        with self._init_lock:
            if self._closed:
                return
            self._closed = True
            resolver = self._resolver
        resolver.close()
        logger.debug(f"Closed context for {self.base_package}")

    def __enter__(self) -> "ApplicationContext":
        self.init()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ContextClosed()

    def _ensure_initialized(self) -> None:
        self._ensure_open()
        if not self._initialized:
            self.init()

    def _ready_resolver(self) -> Resolver:
        self._ensure_initialized()
        return self._resolver

    def __repr__(self) -> str:
        state = "closed" if self._closed else ("initialized" if self._initialized else "new")
        return f"ApplicationContext(base_package={self.base_package!r}, state={state})"

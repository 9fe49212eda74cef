"""beanctx: a minimal dependency injection container.

Classes tagged with ``@component`` inside a package are registered under
their simple name with the first letter lowercased, constructed through
their widest constructor with dependencies resolved by type, and cached as
singletons for the lifetime of the owning context.
"""

from ._version import __version__
from .di import (
    ApplicationContext,
    ComponentScanner,
    StaticDiscoveryProvider,
    component,
    constructor,
)
from .errors import (
    BeanContextError,
    CircularDependency,
    ConfigurationError,
    ConstructionFailed,
    ContextClosed,
    DiscoveryError,
    DuplicateName,
    InvalidConstructor,
    NoSatisfyingType,
    NoSuchBean,
    RegistryFrozen,
    TypeMismatch,
)

__all__ = [
    "__version__",
    "ApplicationContext",
    "ComponentScanner",
    "StaticDiscoveryProvider",
    "component",
    "constructor",
    "BeanContextError",
    "CircularDependency",
    "ConfigurationError",
    "ConstructionFailed",
    "ContextClosed",
    "DiscoveryError",
    "DuplicateName",
    "InvalidConstructor",
    "NoSatisfyingType",
    "NoSuchBean",
    "RegistryFrozen",
    "TypeMismatch",
]

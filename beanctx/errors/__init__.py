"""Error taxonomy for beanctx.

All errors derive from :class:`BeanContextError` and propagate synchronously
to the caller of ``gen_bean``/``resolve``.
"""

from .base import BeanContextError, ErrorContext
from .types import (
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
    type_name,
)

__all__ = [
    # Base classes
    "BeanContextError",
    "ErrorContext",
    # Resolution errors
    "NoSuchBean",
    "NoSatisfyingType",
    "ConstructionFailed",
    "CircularDependency",
    "InvalidConstructor",
    "TypeMismatch",
    # Registry / lifecycle errors
    "DuplicateName",
    "RegistryFrozen",
    "ContextClosed",
    "DiscoveryError",
    "ConfigurationError",
    # Utilities
    "type_name",
]

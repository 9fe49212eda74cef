"""Specific error types raised by the bean container."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

from .base import BeanContextError


def type_name(tp: Any) -> str:
    """Return a dotted, human-readable name for a type or annotation."""
    qualname = getattr(tp, "__qualname__", None)
    module = getattr(tp, "__module__", None)
    if qualname is None:
        return repr(tp)
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"


class NoSuchBean(BeanContextError, LookupError):
    """The requested name is not in the registry."""

    def __init__(self, name: str, **kwargs: Any):
        super().__init__(f"No bean named: {name}", **kwargs)
        self.name = name
        self.context.add_technical_detail("bean_name", name)
        self.with_suggestion(
            "Check that the class is decorated with @component and lives "
            "inside the scanned package"
        )


class NoSatisfyingType(BeanContextError):
    """No registered definition is assignable to a required parameter type."""

    def __init__(
        self,
        required_type: Any,
        *,
        required_by: Optional[type] = None,
        **kwargs: Any,
    ):
        message = f"No bean of type: {type_name(required_type)}"
        if required_by is not None:
            message += f" (required by {type_name(required_by)})"
        super().__init__(message, **kwargs)
        self.required_type = required_type
        self.required_by = required_by
        self.context.add_technical_detail("required_type", type_name(required_type))
        if required_by is not None:
            self.context.add_technical_detail("required_by", type_name(required_by))
        self.with_suggestion(
            f"Register a @component that implements {type_name(required_type)}"
        )


class ConstructionFailed(BeanContextError):
    """Calling the selected constructor raised an exception."""

    def __init__(self, bean_type: type, cause: BaseException, **kwargs: Any):
        super().__init__(
            f"Create bean failed: {type_name(bean_type)}: {cause!r}",
            cause=cause,
            **kwargs,
        )
        self.bean_type = bean_type
        self.context.add_technical_detail("bean_type", type_name(bean_type))


class CircularDependency(BeanContextError):
    """A bean name appeared twice on the active resolution chain."""

    def __init__(self, chain: Sequence[str], **kwargs: Any):
        self.chain: Tuple[str, ...] = tuple(chain)
        super().__init__(
            f"Circular dependency detected: {' -> '.join(self.chain)}",
            **kwargs,
        )
        self.context.add_technical_detail("chain", list(self.chain))
        self.with_suggestion(
            "Break the cycle by removing one of the constructor parameters"
        )


class DuplicateName(BeanContextError):
    """Two types map to the same derived bean name."""

    def __init__(
        self,
        name: str,
        *,
        existing: Optional[type] = None,
        duplicate: Optional[type] = None,
        **kwargs: Any,
    ):
        message = f"Duplicate bean name: {name}"
        if existing is not None and duplicate is not None:
            message += f" ({type_name(existing)} and {type_name(duplicate)})"
        super().__init__(message, **kwargs)
        self.name = name
        self.existing = existing
        self.duplicate = duplicate
        self.with_suggestion("Rename one of the classes so their simple names differ")


class TypeMismatch(BeanContextError, TypeError):
    """A resolved bean is not an instance of the type the caller expected."""

    def __init__(self, name: str, expected: type, actual: type, **kwargs: Any):
        super().__init__(
            f"Bean '{name}' is {type_name(actual)}, expected {type_name(expected)}",
            **kwargs,
        )
        self.name = name
        self.expected = expected
        self.actual = actual
        self.context.add_technical_detail("expected", type_name(expected))
        self.context.add_technical_detail("actual", type_name(actual))


class InvalidConstructor(BeanContextError):
    """A type declares no usable constructor."""

    def __init__(self, bean_type: type, reason: str, **kwargs: Any):
        super().__init__(f"Invalid constructor for {type_name(bean_type)}: {reason}", **kwargs)
        self.bean_type = bean_type
        self.reason = reason


class RegistryFrozen(BeanContextError):
    """Registration was attempted after the registry was frozen."""

    def __init__(self, name: str, **kwargs: Any):
        super().__init__(f"Registry is frozen; cannot register '{name}'", **kwargs)
        self.name = name


class ContextClosed(BeanContextError):
    """The application context was used after close()."""

    def __init__(self, **kwargs: Any):
        super().__init__("Application context is closed", **kwargs)


class DiscoveryError(BeanContextError):
    """The discovery provider could not enumerate a namespace."""

    def __init__(self, namespace: str, message: Optional[str] = None, **kwargs: Any):
        super().__init__(message or f"Failed to scan namespace: {namespace}", **kwargs)
        self.namespace = namespace
        self.context.add_technical_detail("namespace", namespace)


class ConfigurationError(BeanContextError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[Path] = None,
        field_path: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.config_path = config_path
        if config_path:
            self.context.add_technical_detail("config_path", str(config_path))
        if field_path:
            self.context.add_technical_detail("field_path", field_path)

    @classmethod
    def missing_base_package(cls) -> "ConfigurationError":
        """Create error for a context created without a package to scan."""
        error = cls(
            "No base package configured",
            field_path="base_package",
            error_code="CONFIG_MISSING_FIELD",
        )
        error.with_suggestion("Pass base_package or set BEANCTX_BASE_PACKAGE")
        return error

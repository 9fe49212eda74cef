"""Decorators that tag classes and alternate constructors for injection.

A class marked with :func:`component` is picked up by the component
scanner. Classmethods or staticmethods marked with :func:`constructor`
become additional candidate constructors next to ``__init__``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Type, TypeVar, Union, overload

from loguru import logger

T = TypeVar("T")

_METADATA_ATTR = "_di_metadata"
_CONSTRUCTOR_ATTR = "_di_constructor"


@dataclass(frozen=True)
class ComponentMetadata:
    """Metadata for a class tagged as injectable."""
    name: str
    module: str


def bean_name_for(cls: type) -> str:
    """Derive a bean name from a type: its simple name with the first character lowercased."""
    simple_name = cls.__name__
    if not simple_name:
        return simple_name
    return simple_name[0].lower() + simple_name[1:]


def get_component_metadata(cls: Type) -> Optional[ComponentMetadata]:
    """Get metadata for a component class.

    Metadata is read from the class's own namespace, so subclasses of a
    component are not components unless decorated themselves.
    """
    return vars(cls).get(_METADATA_ATTR) if isinstance(cls, type) else None


def is_component(cls: Type) -> bool:
    return get_component_metadata(cls) is not None


@overload
def component(cls: Type[T]) -> Type[T]: ...


@overload
def component() -> Callable[[Type[T]], Type[T]]: ...


def component(
    cls: Optional[Type[T]] = None,
) -> Union[Type[T], Callable[[Type[T]], Type[T]]]:
    """Mark a class as injectable.

    Usable bare (``@component``) or called (``@component()``).

    Args:
        cls: The class being decorated

    Returns:
        The class itself, or a decorator when called without a class
    """
    def decorator(target: Type[T]) -> Type[T]:
        if not isinstance(target, type):
            raise TypeError(f"@component can only decorate classes, got {target!r}")

        metadata = ComponentMetadata(name=bean_name_for(target), module=target.__module__)
        setattr(target, _METADATA_ATTR, metadata)

        logger.debug(f"Tagged component: {target.__qualname__} (name={metadata.name})")
        return target

    if cls is None:
        return decorator
    return decorator(cls)


def constructor(func: Any) -> Any:
    """Mark a classmethod or staticmethod as an alternate constructor.

    Works on either side of ``@classmethod``/``@staticmethod``.
    """
    target = func.__func__ if isinstance(func, (classmethod, staticmethod)) else func
    if not callable(target):
        raise TypeError(f"@constructor can only decorate callables, got {func!r}")
    setattr(target, _CONSTRUCTOR_ATTR, True)
    return func


def is_constructor(member: Any) -> bool:
    """Check whether a class-body member was marked with :func:`constructor`."""
    target = member.__func__ if isinstance(member, (classmethod, staticmethod)) else member
    return bool(getattr(target, _CONSTRUCTOR_ATTR, False))

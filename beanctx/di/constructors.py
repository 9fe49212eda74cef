"""Constructor discovery and selection.

A bean type declares its ``__init__`` (own or inherited) plus every
classmethod or staticmethod marked with ``@constructor``, in class-body
order. The constructor with the greatest number of injectable parameters
is selected; ties go to the earliest declared, so ``__init__`` wins a tie.

Parameters with default values count toward arity. They are injected when
a bean of their type is registered and otherwise keep their default.
"""

import inspect
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, get_type_hints

from loguru import logger

from ..errors import InvalidConstructor
from .decorators import is_constructor

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)

# Marks an argument left to the parameter's default value
USE_DEFAULT = object()


@dataclass(frozen=True)
class BeanConstructor:
    """A candidate constructor of a bean type."""
    owner: type
    name: str
    factory: Callable[..., Any]
    parameters: Tuple[inspect.Parameter, ...]
    hint_source: Any

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def parameter_types(self) -> List[Optional[type]]:
        """Resolve the declared class of every parameter, in order.

        A parameter with a default value whose annotation is missing or not
        a class yields None and is always left to its default.

        Raises:
            InvalidConstructor: If a required parameter is unannotated or
                its annotation is not a class
        """
        if not self.parameters:
            return []

        hints = _get_type_hints(self.owner, self.hint_source)
        types: List[Optional[type]] = []
        for param in self.parameters:
            annotation = hints.get(param.name, param.annotation)
            if has_default(param) and not inspect.isclass(annotation):
                types.append(None)
                continue
            if annotation is inspect.Parameter.empty:
                raise InvalidConstructor(
                    self.owner, f"parameter '{param.name}' of {self.name} has no type annotation"
                )
            if not inspect.isclass(annotation):
                raise InvalidConstructor(
                    self.owner,
                    f"parameter '{param.name}' of {self.name} is annotated with "
                    f"{annotation!r}, which is not a class",
                )
            types.append(annotation)
        return types

    def invoke(self, arguments: Sequence[Any]) -> Any:
        """Call the constructor with one resolved argument per parameter.

        Arguments equal to ``USE_DEFAULT`` are omitted so the parameter
        keeps its default value.
        """
        args, kwargs = [], {}
        for param, value in zip(self.parameters, arguments):
            if param.kind is inspect.Parameter.POSITIONAL_ONLY:
                args.append(param.default if value is USE_DEFAULT else value)
            elif value is not USE_DEFAULT:
                kwargs[param.name] = value

        instance = self.factory(*args, **kwargs)
        if not isinstance(instance, self.owner):
            raise TypeError(
                f"constructor {self.name} returned {type(instance).__name__}, "
                f"not {self.owner.__name__}"
            )
        return instance


def declared_constructors(cls: type) -> List[BeanConstructor]:
    """List the constructors a class declares, in declaration order.

    Args:
        cls: The bean type

    Returns:
        ``__init__`` first, then ``@constructor`` methods in class-body order

    Raises:
        InvalidConstructor: If a signature cannot be inspected or a marked
            member is not a classmethod/staticmethod
    """
    constructors = [_init_constructor(cls)]

    for attr_name, member in vars(cls).items():
        if attr_name == "__init__" or not is_constructor(member):
            continue
        if not isinstance(member, (classmethod, staticmethod)):
            raise InvalidConstructor(
                cls, f"@constructor '{attr_name}' must be a classmethod or staticmethod"
            )

        factory = getattr(cls, attr_name)
        signature = _signature(cls, factory)
        constructors.append(
            BeanConstructor(
                owner=cls,
                name=attr_name,
                factory=factory,
                parameters=_injectable(signature.parameters.values()),
                hint_source=member.__func__,
            )
        )

    return constructors


def select_constructor(cls: type) -> BeanConstructor:
    """Select the constructor with the most parameters (first declared on ties)."""
    candidates = declared_constructors(cls)
    chosen = max(candidates, key=lambda c: c.arity)
    if len(candidates) > 1:
        logger.debug(
            f"Selected {cls.__qualname__}.{chosen.name} (arity {chosen.arity}) "
            f"from {[(c.name, c.arity) for c in candidates]}"
        )
    return chosen


def _init_constructor(cls: type) -> BeanConstructor:
    init = cls.__init__
    if init is object.__init__:
        parameters: Tuple[inspect.Parameter, ...] = ()
    else:
        # Drop the leading 'self'
        params = list(_signature(cls, init).parameters.values())[1:]
        parameters = _injectable(params)

    return BeanConstructor(
        owner=cls,
        name="__init__",
        factory=cls,
        parameters=parameters,
        hint_source=init,
    )


def _signature(cls: type, func: Callable[..., Any]) -> inspect.Signature:
    try:
        return inspect.signature(func)
    except (TypeError, ValueError) as e:
        raise InvalidConstructor(cls, f"cannot inspect signature: {e}") from e


def has_default(param: inspect.Parameter) -> bool:
    return param.default is not inspect.Parameter.empty


def _injectable(params: Sequence[inspect.Parameter]) -> Tuple[inspect.Parameter, ...]:
    return tuple(p for p in params if p.kind not in _VARIADIC)


def _get_type_hints(cls: type, func: Any) -> Dict[str, Any]:
    try:
        return get_type_hints(func)
    except NameError:
        pass
    except TypeError:
        return {}

    # Generated or inherited functions may not see the owner's module globals
    module = sys.modules.get(cls.__module__)
    try:
        return get_type_hints(func, globalns=vars(module) if module else None)
    except (NameError, TypeError) as exc:
        logger.warning(
            f"Could not resolve type hints of {cls.__qualname__}.{getattr(func, '__name__', func)}: {exc}"
        )
        return {}

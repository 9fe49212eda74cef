"""Bean definitions: the registered (name, type) pairs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BeanDefinition:
    """A constructible bean before instantiation."""
    name: str
    type: type

    def __repr__(self) -> str:
        return f"BeanDefinition(name={self.name!r}, type={self.type.__qualname__})"

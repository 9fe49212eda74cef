"""Dependency injection core.

This module provides:
- Component tagging decorators and the package scanner
- The ordered definition registry
- Constructor selection and the resolver
- The singleton cache and the application context that ties them together
"""

from .cache import SingletonCache
from .constructors import BeanConstructor, declared_constructors, select_constructor
from .context import ApplicationContext
from .decorators import (
    ComponentMetadata,
    bean_name_for,
    component,
    constructor,
    get_component_metadata,
    is_component,
)
from .definitions import BeanDefinition
from .discovery import DiscoveryProvider, StaticDiscoveryProvider
from .registry import DefinitionRegistry, is_assignable
from .resolver import Resolver
from .scanner import ComponentScanner

__all__ = [
    # Context
    "ApplicationContext",
    # Decorators
    "component",
    "constructor",
    "ComponentMetadata",
    "get_component_metadata",
    "is_component",
    "bean_name_for",
    # Discovery
    "DiscoveryProvider",
    "StaticDiscoveryProvider",
    "ComponentScanner",
    # Registry and resolution
    "BeanDefinition",
    "DefinitionRegistry",
    "is_assignable",
    "BeanConstructor",
    "declared_constructors",
    "select_constructor",
    "Resolver",
    "SingletonCache",
]

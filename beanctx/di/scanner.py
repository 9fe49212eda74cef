"""Component scanner for automatic discovery.

This module provides the default discovery provider: it imports a package,
walks its modules in sorted order and collects the classes tagged with
``@component`` that each module defines.
"""

import importlib
import inspect
import pkgutil
from types import ModuleType
from typing import Iterable, Iterator, List, Optional, Type

from loguru import logger

from ..errors import BeanContextError, DiscoveryError
from .constructors import select_constructor
from .decorators import get_component_metadata
from .discovery import Discovered


class ComponentScanner:
    """Scanner for discovering decorated components."""

    def __init__(self, strict: bool = False, exclude: Optional[Iterable[str]] = None):
        """Initialize the scanner.

        Args:
            strict: Raise instead of skipping modules that fail to import
            exclude: Dotted module prefixes to skip
        """
        self.strict = strict
        self.exclude = tuple(exclude or ())

    def discover(self, namespace: str) -> Discovered:
        """Discover components in a package or module.

        Args:
            namespace: Dotted path to the package (e.g., "app.services")

        Returns:
            ``(bean_name, type)`` pairs in module order, then definition order

        Raises:
            DiscoveryError: If the namespace itself cannot be imported, or a
                submodule fails while scanning strictly
        """
        return [
            (get_component_metadata(cls).name, cls)
            for cls in self.scan_package(namespace)
        ]

    def scan_package(self, package_path: str) -> List[Type]:
        """Scan a package for decorated component classes."""
        logger.info(f"Scanning package: {package_path}")

        try:
            package = importlib.import_module(package_path)
        except Exception as e:
            raise DiscoveryError(
                package_path, f"Failed to import package {package_path}: {e}", cause=e
            ) from e

        discovered = []
        for module in self._walk(package):
            discovered.extend(self._scan_module(module))

        logger.debug(f"Discovered {len(discovered)} components in {package_path}")
        return discovered

    def _walk(self, package: ModuleType) -> Iterator[ModuleType]:
        yield package

        path = getattr(package, "__path__", None)
        if path is None:
            return

        children = sorted(
            pkgutil.iter_modules(path, package.__name__ + "."),
            key=lambda info: info.name,
        )
        for info in children:
            if self._is_excluded(info.name):
                logger.debug(f"Skipped excluded module {info.name}")
                continue

            module = self._import(info.name)
            if module is None:
                continue
            if info.ispkg:
                yield from self._walk(module)
            else:
                yield module

    def _import(self, module_name: str) -> Optional[ModuleType]:
        try:
            return importlib.import_module(module_name)
        except Exception as e:
            if self.strict:
                raise DiscoveryError(
                    module_name, f"Failed to scan module {module_name}: {e}", cause=e
                ) from e
            logger.warning(f"Failed to scan module {module_name}: {e}")
            return None

    def _is_excluded(self, module_name: str) -> bool:
        return any(
            module_name == prefix or module_name.startswith(prefix + ".")
            for prefix in self.exclude
        )

    def _scan_module(self, module: ModuleType) -> List[Type]:
        """Collect components a module defines, in definition order."""
        components = []

        for obj in list(vars(module).values()):
            if not inspect.isclass(obj):
                continue
            # Skip imported classes
            if obj.__module__ != module.__name__:
                continue

            metadata = get_component_metadata(obj)
            if metadata:
                components.append(obj)
                logger.debug(f"Discovered component: {obj.__name__} in {module.__name__}")

        return components

    def generate_report(self, namespace: str) -> str:
        """Generate a report of discovered components.

        Returns:
            Report string
        """
        report = [f"Component Discovery Report: {namespace}", "=" * 50, ""]

        discovered = self.discover(namespace)
        for name, cls in discovered:
            try:
                arity = str(select_constructor(cls).arity)
            except BeanContextError as e:
                arity = f"invalid ({e})"
            report.append(f"  - {name}: {cls.__module__}.{cls.__qualname__} (constructor arity: {arity})")

        report.append("")
        report.append("SUMMARY")
        report.append("-" * 30)
        report.append(f"Total components: {len(discovered)}")

        return "\n".join(report)

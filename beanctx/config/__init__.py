"""Configuration for beanctx: schemas, file loading and hierarchical merging."""

from .loader import ConfigurationLoader
from .manager import ConfigurationManager
from .schemas import BeanContextSettings, DiscoverySettings, LoggingSettings

__all__ = [
    "BeanContextSettings",
    "DiscoverySettings",
    "LoggingSettings",
    "ConfigurationLoader",
    "ConfigurationManager",
]

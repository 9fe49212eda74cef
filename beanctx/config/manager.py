"""Configuration management for application contexts.

Supports hierarchical configuration loading:
1. User config: ~/.beanctx/config.yaml
2. Project config: ./beanctx.yaml
3. Command config: an explicit file
4. Environment variables (``BEANCTX_`` prefix)
"""

from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger
from pydantic import ValidationError

from ..errors import ConfigurationError
from .loader import ConfigurationLoader
from .schemas import BeanContextSettings


class ConfigurationManager:
    """Loads, merges and validates beanctx configuration."""

    def __init__(
        self,
        user_config_path: Optional[Path] = None,
        project_config_path: Optional[Path] = None,
        command_config_path: Optional[Path] = None,
    ):
        """Initialize configuration manager.

        Args:
            user_config_path: Path to user config file
            project_config_path: Path to project config file
            command_config_path: Path to command-specific config file
        """
        self.loader = ConfigurationLoader()

        self.user_config_path = user_config_path or Path.home() / ".beanctx" / "config.yaml"
        self.project_config_path = project_config_path or Path.cwd() / "beanctx.yaml"
        self.command_config_path = command_config_path

        self._settings_cache: Optional[BeanContextSettings] = None

    def load_configuration(self) -> Dict[str, Any]:
        """Load and merge the configuration files (lowest priority first).

        Returns:
            Merged configuration dictionary, before environment overrides
        """
        config: Dict[str, Any] = {}

        for path in (self.user_config_path, self.project_config_path):
            if path.exists():
                logger.debug(f"Loading configuration from {path}")
                config = self.loader.merge_configs(config, self.loader.load_yaml(path))

        if self.command_config_path is not None:
            # An explicitly requested file must exist
            logger.debug(f"Loading configuration from {self.command_config_path}")
            config = self.loader.merge_configs(
                config, self.loader.load_yaml(self.command_config_path)
            )

        return config

    def load_settings(self) -> BeanContextSettings:
        """Load validated settings with environment overrides applied.

        Raises:
            ConfigurationError: If a file is invalid or validation fails
        """
        if self._settings_cache is not None:
            return self._settings_cache

        config = self.load_configuration()
        try:
            settings = BeanContextSettings.from_dict(config)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e}",
                config_path=self.command_config_path,
                cause=e,
            ) from e

        self._settings_cache = settings
        return settings

    def invalidate(self) -> None:
        """Forget cached settings so the next load re-reads the sources."""
        self._settings_cache = None

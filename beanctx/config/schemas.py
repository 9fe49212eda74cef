"""Configuration schemas for beanctx.

Settings are validated with Pydantic; environment variables with the
``BEANCTX_`` prefix override file values (``__`` separates nested keys,
e.g. ``BEANCTX_DISCOVERY__STRICT=true``).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiscoverySettings(BaseModel):
    """Component scanning configuration."""

    strict: bool = Field(False, description="Fail on modules that cannot be imported")
    exclude: List[str] = Field(default_factory=list, description="Module prefixes to skip")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Logging level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid logging level. Must be one of: {valid_levels}")
        return v_upper


class BeanContextSettings(BaseSettings):
    """Root configuration for an application context."""

    model_config = SettingsConfigDict(
        env_prefix="BEANCTX_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    base_package: Optional[str] = Field(None, description="Package scanned for components")
    discovery: DiscoverySettings = Field(default_factory=DiscoverySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment variables take precedence over values loaded from files
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BeanContextSettings":
        """Create settings from a dictionary (environment still applies on top)."""
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

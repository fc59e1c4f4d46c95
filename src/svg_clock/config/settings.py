"""Settings and configuration management using Pydantic."""

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple, Type

import yaml
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from svg_clock.logging.config import get_logger

logger = get_logger(__name__)

CONFIG_FILE = Path("config.yaml")

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,4}$")


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Loads settings from ``config.yaml`` in the working directory."""

    def get_field_value(self, field: Any, field_name: str) -> Tuple[Any, str, bool]:
        return self._load().get(field_name), field_name, False

    def _load(self) -> Dict[str, Any]:
        if not CONFIG_FILE.exists():
            return {}

        encoding = self.config.get("env_file_encoding")
        try:
            content = yaml.safe_load(CONFIG_FILE.read_text(encoding))
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load {CONFIG_FILE}: {e}")
            return {}

        if not isinstance(content, dict):
            return {}
        return content

    def __call__(self) -> Dict[str, Any]:
        fields = self.settings_cls.model_fields
        return {key: value for key, value in self._load().items() if key in fields}


class Settings(BaseSettings):
    """SVG Clock configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="SVGCLOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # First source wins: explicit values, then environment, then YAML
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # Clock
    clock_size: int = Field(
        default=250,
        gt=0,
        description="Rendered clock size in pixels (read on every tick)",
    )
    clock_update_interval: float = Field(
        default=1.0,
        gt=0,
        description="Seconds between clock refreshes",
    )
    clock_output_path: Path = Field(
        default=Path("/tmp/svg_clock/clock.svg"),
        description="Display file the clock daemon keeps up to date",
    )

    # Theme
    foreground_color: str = Field(
        default="#000000",
        description="Colour of the dial outline, ticks and hands",
    )
    background_color: str = Field(
        default="#ffffff",
        description="Colour of the dial face",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Log file path",
    )

    # Web viewer
    web_host: str = Field(
        default="127.0.0.1",
        description="Interface the web viewer binds to",
    )
    web_port: int = Field(
        default=8001,
        ge=1024,
        le=65535,
        description="Port for the web viewer",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("foreground_color", "background_color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Validate colours are #rgb, #rrggbb or deeper hex triplets."""
        if not _HEX_COLOR.match(v):
            raise ValueError(f"Invalid hex colour: {v!r}")
        return v

    @field_validator("clock_output_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Expand environment variables and user paths."""
        if v is None:
            return None
        if isinstance(v, str):
            v = os.path.expandvars(os.path.expanduser(v))
        return Path(v)

    def ensure_directories(self) -> None:
        """Ensure required directories exist."""
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.clock_output_path.parent.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

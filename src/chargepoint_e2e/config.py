"""
Configuration management for the charge point E2E suite.

Settings are read from ``E2E_*`` environment variables and, optionally,
from a TOML file named by ``E2E_CONFIG_FILE``.
"""

import os
import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfigError, MissingConfigError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class LoggingSettings(BaseSettings):
    """Diagnostic logger settings."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_LOG_",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Minimum log level")
    timestamps: bool = Field(
        default=True, description="Prefix lines with an ISO timestamp"
    )
    colors: bool = Field(default=True, description="Color lines by level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level, accepting WARN as an alias of WARNING."""
        v_upper = v.upper()
        if v_upper == "WARN":
            v_upper = "WARNING"
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        return v_upper


class E2ESettings(BaseSettings):
    """Settings for the application under test and the browser session."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_",
        extra="ignore",
    )

    # Application under test
    base_url: str = Field(
        default="http://localhost:3000", description="UI base URL"
    )
    api_url: str = Field(
        default="http://localhost:3001", description="API base URL"
    )
    app_title: str = Field(
        default="React App", description="Expected document title pattern"
    )

    # Browser
    headless: bool = Field(default=True, description="Run browsers headless")
    channel: Optional[str] = Field(
        default=None, description="Browser channel, e.g. chrome or msedge"
    )
    slow_mo: int = Field(default=0, ge=0, description="Slow motion delay (ms)")
    timeout: int = Field(
        default=30000, gt=0, description="Action and navigation timeout (ms)"
    )
    expect_timeout: int = Field(
        default=5000, gt=0, description="Polling assertion timeout (ms)"
    )

    # Artifacts
    results_dir: Path = Field(
        default=Path("test-results"), description="Test artifact directory"
    )
    screenshot_on_failure: bool = Field(
        default=True, description="Save a screenshot when a UI test fails"
    )
    record_video: bool = Field(
        default=False, description="Record a video of every browser context"
    )

    # Seconds to wait when checking that the app is reachable
    probe_timeout: float = Field(default=2.0, gt=0)

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("base_url", "api_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def screenshots_dir(self) -> Path:
        return self.results_dir / "screenshots"

    @property
    def videos_dir(self) -> Path:
        return self.results_dir / "videos"

    @classmethod
    def from_toml(cls, path: str | Path) -> "E2ESettings":
        """
        Load settings from a TOML configuration file.

        The file may hold an ``[e2e]`` table with top-level settings and a
        ``[logging]`` table with logger settings. Environment variables are
        still read for anything the file leaves out.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            E2ESettings instance with loaded configuration.

        Raises:
            MissingConfigError: If the file does not exist.
            InvalidConfigError: If the file cannot be parsed.
        """
        path = Path(path)
        if not path.exists():
            raise MissingConfigError("E2E_CONFIG_FILE", {"path": str(path)})

        try:
            with open(path, "rb") as f:
                config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigError(
                config_key="config_file",
                value=str(path),
                reason=f"Failed to parse TOML: {e}",
            ) from e

        return cls._from_dict(config_data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "E2ESettings":
        settings_kwargs: dict[str, Any] = {}

        if "e2e" in data:
            settings_kwargs.update(data["e2e"])

        if "logging" in data:
            settings_kwargs["logging"] = LoggingSettings(**data["logging"])

        return cls(**settings_kwargs)


@dataclass
class BrowserConfig:
    """Launch and context options for a browser instance."""

    base_url: str
    headless: bool = True
    slow_mo: int = 0
    viewport_width: int = 1280
    viewport_height: int = 720
    locale: str = "en-US"
    channel: Optional[str] = None
    video_dir: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: E2ESettings) -> "BrowserConfig":
        return cls(
            base_url=settings.base_url,
            headless=settings.headless,
            slow_mo=settings.slow_mo,
            channel=settings.channel,
            video_dir=str(settings.videos_dir) if settings.record_video else None,
        )

    def to_launch_options(self) -> dict[str, Any]:
        """Convert to Playwright browser launch options."""
        options: dict[str, Any] = {
            "headless": self.headless,
            "slow_mo": self.slow_mo,
        }
        if self.channel:
            options["channel"] = self.channel
        return options

    def to_context_options(self) -> dict[str, Any]:
        """Convert to Playwright browser context options."""
        options: dict[str, Any] = {
            "viewport": {
                "width": self.viewport_width,
                "height": self.viewport_height,
            },
            "locale": self.locale,
            "base_url": self.base_url,
        }
        if self.video_dir:
            options["record_video_dir"] = self.video_dir
        return options


@lru_cache()
def get_settings() -> E2ESettings:
    """
    Get cached suite settings.

    Loads from the TOML file named by ``E2E_CONFIG_FILE`` when it is set,
    otherwise from the environment alone.

    Returns:
        E2ESettings instance.
    """
    config_file = os.getenv("E2E_CONFIG_FILE")

    if config_file:
        return E2ESettings.from_toml(config_file)
    return E2ESettings()


def reload_settings() -> E2ESettings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh E2ESettings instance.
    """
    get_settings.cache_clear()
    return get_settings()

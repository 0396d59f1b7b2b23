# src/picocompat/core/config.py
"""
Settings for the compatibility layer.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction and are passed
explicitly to the collaborators that need them.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class TwigSettings(BaseModel):
    """Template engine options the legacy constants are derived from."""

    model_config = {"frozen": True, "extra": "allow"}

    cache: str | Literal[False] = Field(
        default=False,
        description="Template cache directory, or false to disable caching",
    )


class LoggingSettings(BaseModel):
    """Logging output options."""

    model_config = {"frozen": True, "extra": "forbid"}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class CompatSettings(BaseModel):
    """Host settings consumed by the compatibility layer.

    Example YAML:
        root_dir: /srv/site/
        config_dir: /srv/site/config/
        plugins_dir: /srv/site/plugins/
        themes_dir: /srv/site/themes/
        content_dir: /srv/site/content/
        content_ext: .md
        base_url: https://example.com/
        rewrite_url: false
        twig_config:
          cache: /srv/site/cache/twig/
    """

    model_config = {"frozen": True}

    root_dir: str = Field(description="Host root directory")
    config_dir: str = Field(description="Host config directory")
    plugins_dir: str = Field(description="Host plugins directory")
    themes_dir: str = Field(description="Host themes directory")
    content_dir: str = Field(description="Content directory")
    content_ext: str = Field(default=".md", description="File extension of content files")
    base_url: str = Field(description="Base URL pages are served under")
    rewrite_url: bool = Field(
        default=False,
        description="Whether URL rewriting is enabled (pages served as /page instead of /?page)",
    )
    lib_dir: str | None = Field(
        default=None,
        description="Host library directory (defaults to the installed picocompat package)",
    )
    twig_config: TwigSettings = Field(default_factory=TwigSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Base URL must be non-empty and end with a slash."""
        if not v.strip():
            raise ValueError("base_url must not be empty")
        return v if v.endswith("/") else v + "/"

    @property
    def cache_dir(self) -> str:
        """Template cache directory, empty when caching is disabled."""
        return self.twig_config.cache or ""

    @property
    def resolved_lib_dir(self) -> str:
        if self.lib_dir is not None:
            return self.lib_dir
        return str(Path(__file__).resolve().parent.parent) + "/"


def load_settings(config_path: Path) -> CompatSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (PICOCOMPAT_*) - highest priority
    2. Config file
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: PICOCOMPAT_TWIG_CONFIG__CACHE for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated CompatSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="PICOCOMPAT",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return CompatSettings(**raw_config)

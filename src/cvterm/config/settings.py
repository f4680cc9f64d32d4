"""Configuration management for cvterm.

Loads settings from a YAML configuration file with environment variable
overrides (``CVTERM_`` prefix, ``__`` for nested sections). Supports
.env files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/cvterm.yaml")
DEFAULT_CV_URL = "https://st2projects.com/cv/cv.json"


class SourceConfig(BaseModel):
    url: str = Field(default=DEFAULT_CV_URL, description="Endpoint serving the CV JSON")
    timeout: float = Field(default=10.0, gt=0, description="Fetch timeout in seconds")


class CacheConfig(BaseModel):
    ttl_ms: int = Field(default=5 * 60 * 1000, ge=0, description="Freshness window")


class ServerConfig(BaseModel):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)


class ConsoleConfig(BaseModel):
    wrap_width: int = Field(default=56, gt=10, description="Column budget for wrapped highlights")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for cvterm.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "CVTERM_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    source: SourceConfig = Field(default_factory=SourceConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs and must yield to the environment.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    _apply_env_overrides(yaml_data)

    return Settings(**yaml_data)


def _apply_env_overrides(yaml_data: dict) -> None:
    """Apply the unprefixed ``CV_URL`` shortcut used by deployments.

    It replaces any YAML ``source.url``. ``CVTERM_SOURCE__URL`` still wins
    over both.
    """
    cv_url = os.environ.get("CV_URL", "")
    if not cv_url:
        return
    source = yaml_data.setdefault("source", {})
    source["url"] = cv_url

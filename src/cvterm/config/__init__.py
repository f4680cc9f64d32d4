"""Configuration management for cvterm.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides for the document endpoint and
cache TTL.
"""

from cvterm.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]

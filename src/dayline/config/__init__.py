"""
Configuration helpers for the Dayline dashboard.
"""

from .settings import DEFAULT_API_URL, ConfigError, Settings, get_settings

__all__ = ["DEFAULT_API_URL", "ConfigError", "Settings", "get_settings"]

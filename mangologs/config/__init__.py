"""
Configuration management for MangoLogs.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for endpoints, timeouts and program ids.
"""

from mangologs.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]

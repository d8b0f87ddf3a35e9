"""
Configuration management for dirpanel.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/dirpanel/config.yaml)
- Environment variables

Modified: 2026-10-18
"""

from dirpanel.config.settings import (
    Settings,
    WorkspaceSettings,
    DisplaySettings,
    BehaviorSettings,
    EditorSettings,
    LoggingSettings,
    get_config_dir,
    get_cache_dir,
)

__all__ = [
    "Settings",
    "WorkspaceSettings",
    "DisplaySettings",
    "BehaviorSettings",
    "EditorSettings",
    "LoggingSettings",
    "get_config_dir",
    "get_cache_dir",
]

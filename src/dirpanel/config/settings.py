"""
Configuration management for dirpanel.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2026-10-18
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from dirpanel.core.exceptions import ConfigurationError


@dataclass
class WorkspaceSettings:
    """Workspace root settings."""

    root: Optional[str] = None
    use_cwd: bool = True  # Fall back to the working directory when root is unset


@dataclass
class DisplaySettings:
    """Listing display settings."""

    hidden_marker: str = "."
    date_format: str = "%Y-%m-%d %H:%M"
    size_placeholder: str = "-"


@dataclass
class BehaviorSettings:
    """Behavior settings."""

    search_debounce: float = 0.3  # seconds


@dataclass
class EditorSettings:
    """Editor used to open files."""

    command: Optional[str] = None  # None uses $VISUAL / $EDITOR


@dataclass
class LoggingSettings:
    """Log file settings."""

    level: str = "INFO"
    file: str = "~/.cache/dirpanel/dirpanel.log"


@dataclass
class Settings:
    """Main settings container."""

    workspace: WorkspaceSettings = field(default_factory=WorkspaceSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    behavior: BehaviorSettings = field(default_factory=BehaviorSettings)
    editor: EditorSettings = field(default_factory=EditorSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/dirpanel/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the config file is not valid YAML or
                holds values of the wrong type
        """
        settings = cls()

        if config_path is None:
            config_path = Path.home() / ".config" / "dirpanel" / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(f"Config file {config_path} must contain a mapping")

            # Workspace settings
            if "workspace" in config_data:
                ws = _section(config_data, "workspace")
                settings.workspace = WorkspaceSettings(
                    root=ws.get("root"),
                    use_cwd=ws.get("use_cwd", True),
                )

            # Display settings
            if "display" in config_data:
                display = _section(config_data, "display")
                settings.display = DisplaySettings(
                    hidden_marker=display.get("hidden_marker", "."),
                    date_format=display.get("date_format", "%Y-%m-%d %H:%M"),
                    size_placeholder=display.get("size_placeholder", "-"),
                )

            # Behavior settings
            if "behavior" in config_data:
                behavior = _section(config_data, "behavior")
                settings.behavior = BehaviorSettings(
                    search_debounce=_to_seconds(behavior.get("search_debounce", 0.3)),
                )

            # Editor settings
            if "editor" in config_data:
                editor = _section(config_data, "editor")
                settings.editor = EditorSettings(command=editor.get("command"))

            # Logging settings
            if "logging" in config_data:
                log = _section(config_data, "logging")
                settings.logging = LoggingSettings(
                    level=str(log.get("level", "INFO")).upper(),
                    file=log.get("file", "~/.cache/dirpanel/dirpanel.log"),
                )

        # Override with environment variables
        workspace_env = os.getenv("DIRPANEL_WORKSPACE")
        if workspace_env:
            settings.workspace.root = workspace_env

        editor_env = os.getenv("DIRPANEL_EDITOR")
        if editor_env:
            settings.editor.command = editor_env

        log_level_env = os.getenv("DIRPANEL_LOG_LEVEL")
        if log_level_env:
            settings.logging.level = log_level_env.upper()

        debounce_env = os.getenv("DIRPANEL_SEARCH_DEBOUNCE")
        if debounce_env:
            settings.behavior.search_debounce = _to_seconds(debounce_env)

        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "workspace": {
                "root": self.workspace.root,
                "use_cwd": self.workspace.use_cwd,
            },
            "display": {
                "hidden_marker": self.display.hidden_marker,
                "date_format": self.display.date_format,
                "size_placeholder": self.display.size_placeholder,
            },
            "behavior": {
                "search_debounce": self.behavior.search_debounce,
            },
            "editor": {"command": self.editor.command},
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data[name] or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"{name} must be a mapping, got {section!r}")
    return section


def _to_seconds(value: Any) -> float:
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"search_debounce must be a number, got {value!r}") from None
    if seconds < 0:
        raise ConfigurationError(f"search_debounce must not be negative, got {seconds}")
    return seconds


def get_config_dir() -> Path:
    """Get configuration directory, creating if needed."""
    config_dir = Path.home() / ".config" / "dirpanel"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_cache_dir() -> Path:
    """Get cache directory, creating if needed."""
    cache_dir = Path.home() / ".cache" / "dirpanel"
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir

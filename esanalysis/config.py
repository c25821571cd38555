"""Configuration management for the command line tool."""

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULTS: dict[str, Any] = {
    "indent": 2,
    "log_level": None,
}


class Config:
    """Configuration loading for the esanalysis tool."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        return [
            xdg_config_home / "esanalysis" / "config.yaml",
            Path(".esanalysis.yaml"),
        ]

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result: dict[str, Any] = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from defaults, files, and environment variables.

    Later sources win: built-in defaults, then the default config paths,
    then an explicit ``path``, then ``ESANALYSIS_*`` environment variables.
    """
    config = dict(DEFAULTS)

    for default_path in Config.get_config_paths():
        if default_path.exists():
            config = Config.merge_configs(config, Config.from_file(default_path))

    if path is not None:
        config = Config.merge_configs(config, Config.from_file(path))

    env_overrides: dict[str, Any] = {}
    if indent := os.environ.get("ESANALYSIS_INDENT"):
        try:
            env_overrides["indent"] = int(indent)
        except ValueError:
            raise ValueError(f"ESANALYSIS_INDENT must be an integer, got {indent!r}")
    if log_level := os.environ.get("ESANALYSIS_LOG_LEVEL"):
        env_overrides["log_level"] = log_level.upper()

    return Config.merge_configs(config, env_overrides)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result

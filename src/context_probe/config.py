"""CLI configuration management.

Handles optional persistent configuration stored in
~/.context-probe/config.yaml. Supports environment variable overrides and
CLI flag precedence.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .shared.logging import LOG_LEVELS

# Default values
DEFAULT_EXECUTABLE = "claude"
DEFAULT_CONTINUE_FLAG = "-c"
DEFAULT_LOG_LEVEL = "warning"

CONFIG_KEYS = ("executable", "continue_flag", "log_level")

# Environment variable mappings
ENV_VARS = {
    "executable": "CONTEXT_PROBE_EXECUTABLE",
    "continue_flag": "CONTEXT_PROBE_CONTINUE_FLAG",
    "log_level": "CONTEXT_PROBE_LOG_LEVEL",
}


@dataclass
class ProbeConfig:
    """CLI configuration."""

    executable: str = DEFAULT_EXECUTABLE
    continue_flag: str = DEFAULT_CONTINUE_FLAG
    log_level: str = DEFAULT_LOG_LEVEL

    # Track where each value came from
    _sources: dict[str, str] = field(default_factory=dict)

    def get_source(self, key: str) -> str:
        """Get the source of a config value."""
        return self._sources.get(key, "default")

    def apply_overrides(self, **overrides: Any) -> None:
        """Apply command-line values, ignoring the ones left unset."""
        for key, value in overrides.items():
            if key not in CONFIG_KEYS:
                raise ConfigError(f"Unknown config key: {key}")
            if value is None:
                continue
            setattr(self, key, str(value))
            self._sources[key] = "command line"


def get_config_path() -> Path:
    """Get the CLI config file path.

    Returns:
        Path to ~/.context-probe/config.yaml
    """
    return Path.home() / ".context-probe" / "config.yaml"


def _read_config_file(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path) as f:
            file_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    if not isinstance(file_config, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return file_config


def load_config(config_path: Path | None = None) -> ProbeConfig:
    """Load CLI configuration.

    Precedence (highest to lowest):
    1. Environment variables
    2. Config file (~/.context-probe/config.yaml)
    3. Defaults

    Command-line flags are layered on top by the caller through
    ProbeConfig.apply_overrides.

    Args:
        config_path: Explicit config file; defaults to get_config_path()

    Returns:
        ProbeConfig with values and sources

    Raises:
        ConfigError: If the config file exists but cannot be used, or the
            resulting log_level is not a known level
    """
    config = ProbeConfig()
    sources = {key: "default" for key in CONFIG_KEYS}

    path = config_path or get_config_path()
    if path.exists():
        file_config = _read_config_file(path)
        for key in CONFIG_KEYS:
            if file_config.get(key) is not None:
                setattr(config, key, str(file_config[key]))
                sources[key] = "config file"

    for key, env_var in ENV_VARS.items():
        if os.environ.get(env_var):
            setattr(config, key, os.environ[env_var])
            sources[key] = "environment"

    if config.log_level.lower() not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid log_level '{config.log_level}' from {sources['log_level']}; "
            f"expected one of: {', '.join(LOG_LEVELS)}"
        )

    config._sources = sources
    return config

"""Configuration loading from TOML files and environment variables."""

import os
import tomllib
from pathlib import Path
from typing import Any

from todo_hub.config.models import TodoHubConfig
from todo_hub.config.paths import STORE_ENV_VAR, get_config_path


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("todo-hub.toml"),  # Current directory
        get_config_path(),  # ~/.todo-hub/config.toml (or TODO_HUB_HOME)
        Path("/etc/todo-hub/config.toml"),  # System-wide
    ]


def _resolve_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment overrides on top of file values."""
    if store := os.environ.get(STORE_ENV_VAR):
        storage = config.get("storage")
        if not isinstance(storage, dict):
            storage = {}
            config["storage"] = storage
        storage["path"] = store
    return config


def load_config(path: Path | None = None) -> TodoHubConfig:
    """Load configuration from TOML file.

    Args:
        path: Explicit path to config file. If None, searches default locations.

    Returns:
        Validated TodoHubConfig instance.

    Raises:
        FileNotFoundError: If no config file is found.
        ValueError: If config file is invalid.
    """
    config_path: Path | None = None

    default_paths = _get_default_config_paths()

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in default_paths:
            expanded = default_path.expanduser()
            if expanded.exists():
                config_path = expanded
                break

    if config_path is None:
        raise FileNotFoundError(
            f"No config file found. Searched: {', '.join(str(p) for p in default_paths)}"
        )

    with config_path.open("rb") as f:
        raw_config = tomllib.load(f)

    raw_config = _resolve_env_overrides(raw_config)

    return TodoHubConfig.model_validate(raw_config)


def get_default_config() -> TodoHubConfig:
    """Get a default configuration, honoring environment overrides."""
    return TodoHubConfig.model_validate(_resolve_env_overrides({}))


def load_config_or_default(path: Path | None = None) -> TodoHubConfig:
    """Load an explicit config, or the first default one, or built-in defaults.

    An explicit path that does not exist is still an error.
    """
    if path is not None:
        return load_config(path)
    try:
        return load_config()
    except FileNotFoundError:
        return get_default_config()

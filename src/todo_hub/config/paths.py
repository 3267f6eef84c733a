"""Centralized path management for Todo Hub.

All state (config, todo records, logs) is stored under a single base directory.
The base directory can be overridden with the TODO_HUB_HOME environment variable.

Default locations:
- Linux/macOS: ~/.todo-hub
- Windows: %USERPROFILE%\\.todo-hub
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "TODO_HUB_HOME"
STORE_ENV_VAR = "TODO_HUB_STORE"


@lru_cache(maxsize=1)
def get_todo_hub_home() -> Path:
    """Get the base directory for all Todo Hub data.

    Resolution order:
    1. TODO_HUB_HOME environment variable (if set)
    2. Platform default (~/.todo-hub)

    Returns:
        Path to the Todo Hub home directory.
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".todo-hub"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_todo_hub_home() / "config.toml"


def get_store_path() -> Path:
    """Get the default record store path.

    TODO_HUB_STORE takes precedence over the home directory default.
    """
    if env_store := os.environ.get(STORE_ENV_VAR):
        return Path(env_store).expanduser()
    return get_todo_hub_home() / "todos.json"


def get_logs_path() -> Path:
    """Get the default logs directory path."""
    return get_todo_hub_home() / "logs"

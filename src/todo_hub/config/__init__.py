"""Configuration module."""

from todo_hub.config.loader import (
    get_default_config,
    load_config,
    load_config_or_default,
)
from todo_hub.config.models import (
    ConfigError,
    StorageConfig,
    TodoHubConfig,
    ViewConfig,
)
from todo_hub.config.paths import (
    get_config_path,
    get_logs_path,
    get_store_path,
    get_todo_hub_home,
)

__all__ = [
    "ConfigError",
    "StorageConfig",
    "TodoHubConfig",
    "ViewConfig",
    "get_config_path",
    "get_default_config",
    "get_logs_path",
    "get_store_path",
    "get_todo_hub_home",
    "load_config",
    "load_config_or_default",
]

"""Configuration models using Pydantic."""

import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from todo_hub.config.paths import get_store_path

# URI schemes the host already owns; decoration lookups must not collide.
RESERVED_SCHEMES = frozenset({"file", "untitled", "http", "https", "vscode"})

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*$")


class StorageConfig(BaseModel):
    """Configuration for the record store.

    All records live in one JSON document under a single key, so the
    file can be shared with other state without clashing.
    """

    path: Path = Field(default_factory=get_store_path)
    key: str = "todos"

    @field_validator("key")
    @classmethod
    def _key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("storage key must not be blank")
        return value


class ViewConfig(BaseModel):
    """Initial tree layout and decoration routing."""

    ongoing_expanded: bool = True
    completed_expanded: bool = False
    uri_scheme: str = "todo"

    @field_validator("uri_scheme")
    @classmethod
    def _validate_scheme(cls, value: str) -> str:
        scheme = value.strip().lower()
        if not _SCHEME_RE.match(scheme):
            raise ValueError(f"invalid uri scheme: {value!r}")
        if scheme in RESERVED_SCHEMES:
            raise ValueError(f"uri scheme {scheme!r} is reserved by the host")
        return scheme


class ConfigError(Exception):
    """Configuration error."""

    pass


class TodoHubConfig(BaseModel):
    """Root configuration model."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)

    @property
    def store_path(self) -> Path:
        return self.storage.path.expanduser()

"""Shared test fixtures and factories."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from todo_hub.config.paths import ENV_VAR, STORE_ENV_VAR, get_todo_hub_home
from todo_hub.controller import ViewController
from todo_hub.store import MemoryRecordStore
from todo_hub.todos import DecorationMapper, TodoProvider

# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def todo_hub_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point TODO_HUB_HOME at a temp dir so no test touches ~/.todo-hub."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv(ENV_VAR, str(home))
    monkeypatch.delenv(STORE_ENV_VAR, raising=False)
    monkeypatch.delenv("TODO_HUB_LOG_LEVEL", raising=False)
    get_todo_hub_home.cache_clear()
    yield home
    get_todo_hub_home.cache_clear()


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def config_toml_content(tmp_path: Path) -> str:
    """Valid TOML config content."""
    return f"""
[storage]
path = "{(tmp_path / "configured.json").as_posix()}"
key = "todos"

[view]
ongoing_expanded = true
completed_expanded = true
uri_scheme = "todo"
"""


@pytest.fixture
def config_file(tmp_path: Path, config_toml_content: str) -> Path:
    """Create a temporary config file."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(config_toml_content)
    return config_path


# =============================================================================
# View Model Fixtures
# =============================================================================


@pytest.fixture
def store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture
def provider(store: MemoryRecordStore) -> TodoProvider:
    return TodoProvider(store)


@pytest.fixture
def decorations(provider: TodoProvider) -> DecorationMapper:
    return DecorationMapper(provider)


@pytest.fixture
def controller(
    provider: TodoProvider, decorations: DecorationMapper
) -> ViewController:
    controller = ViewController(provider, decorations)
    controller.activate()
    return controller


@pytest.fixture
def seed(store: MemoryRecordStore):
    """Write raw records into the store: seed(("label", completed), ...)."""

    def _seed(*specs: tuple[str, bool]) -> list[str]:
        records = [
            {"label": label, "completed": completed, "id": f"id-{i}"}
            for i, (label, completed) in enumerate(specs)
        ]
        store.set("todos", records)
        return [r["id"] for r in records]

    return _seed


# =============================================================================
# CLI Test Helpers
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})


@pytest.fixture
def store_file(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"

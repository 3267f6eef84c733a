"""Shared runtime bootstrap helpers for CLI entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from todo_hub.config import TodoHubConfig, load_config_or_default
from todo_hub.controller import Notify, Prompt, ViewController
from todo_hub.store import JsonFileRecordStore, create_record_store
from todo_hub.todos import DecorationMapper, ExpansionState, TodoProvider


@dataclass(slots=True)
class RuntimeBootstrap:
    """Composed runtime dependencies for CLI command handlers."""

    config: TodoHubConfig
    store: JsonFileRecordStore
    controller: ViewController


def bootstrap_runtime(
    *,
    config_path: Path | None = None,
    store_path: Path | None = None,
    prompt: Prompt | None = None,
    notify: Notify | None = None,
) -> RuntimeBootstrap:
    """Load config, open the record store and wire an activated controller."""
    config = load_config_or_default(config_path)
    if store_path is not None:
        config = config.model_copy(
            update={"storage": config.storage.model_copy(update={"path": store_path})}
        )

    store = create_record_store(config)
    provider = TodoProvider(
        store,
        key=config.storage.key,
        ongoing=ExpansionState.from_flag(config.view.ongoing_expanded),
        completed=ExpansionState.from_flag(config.view.completed_expanded),
        scheme=config.view.uri_scheme,
    )
    controller = ViewController(
        provider,
        DecorationMapper(provider),
        prompt=prompt,
        notify=notify,
    )
    controller.activate()
    return RuntimeBootstrap(config=config, store=store, controller=controller)

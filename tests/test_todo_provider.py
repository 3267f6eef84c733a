"""Tests for the todo tree provider."""

from __future__ import annotations

import pytest

from todo_hub.store import MemoryRecordStore, RecordStoreError
from todo_hub.todos import (
    ExpansionState,
    Item,
    Section,
    SectionKind,
    TodoProvider,
)


def _sections(provider: TodoProvider) -> tuple[Section, Section]:
    ongoing, completed = provider.children()
    assert isinstance(ongoing, Section)
    assert isinstance(completed, Section)
    return ongoing, completed


def _ids(items) -> list[str]:
    return [item.id for item in items]


class TestChildren:
    """Tests for tree derivation."""

    def test_root_has_two_sections_when_empty(self, provider):
        ongoing, completed = _sections(provider)
        assert ongoing.kind is SectionKind.ONGOING
        assert completed.kind is SectionKind.COMPLETED
        assert ongoing.count == 0
        assert completed.count == 0

    def test_root_has_two_sections_with_records(self, provider, seed):
        seed(("a", False), ("b", True), ("c", False))
        ongoing, completed = _sections(provider)
        assert (ongoing.count, completed.count) == (2, 1)
        assert ongoing.label == "Ongoing (2)"
        assert completed.label == "Completed (1)"
        assert ongoing.context_value == "todoSection"

    def test_default_expansion_state(self, provider):
        ongoing, completed = _sections(provider)
        assert ongoing.expansion is ExpansionState.EXPANDED
        assert completed.expansion is ExpansionState.COLLAPSED

    def test_sections_partition_list_in_insertion_order(self, provider, seed):
        seed(("a", False), ("b", True), ("c", False), ("d", True))
        ongoing, completed = _sections(provider)

        ongoing_items = provider.children(ongoing)
        completed_items = provider.children(completed)

        assert _ids(ongoing_items) == ["id-0", "id-2"]
        assert _ids(completed_items) == ["id-1", "id-3"]
        assert all(not i.completed for i in ongoing_items)
        assert all(i.completed for i in completed_items)
        assert sorted(_ids(ongoing_items) + _ids(completed_items)) == sorted(
            r.id for r in provider.list()
        )

    def test_items_carry_view_attributes(self, provider, seed):
        seed(("open", False), ("closed", True))
        ongoing, completed = _sections(provider)
        [open_item] = provider.children(ongoing)
        [closed_item] = provider.children(completed)

        assert isinstance(open_item, Item)
        assert open_item.context_value == "todoItemOngoing"
        assert open_item.icon == "circle-outline"
        assert open_item.tooltip == "open"
        assert open_item.resource_uri == "todo:id-0"
        assert open_item.command.command == "todo-hub.renameTodo"
        assert open_item.command.arguments == ("id-0",)

        assert closed_item.context_value == "todoItemCompleted"
        assert closed_item.icon == "check"
        assert closed_item.tooltip == "closed (completed)"

    def test_list_empty_when_store_uninitialized(self, provider, store):
        assert store.keys() == []
        assert provider.list() == []

    def test_list_skips_malformed_records(self, store):
        store.set("todos", [{"label": "ok", "id": "1"}, "junk", {"label": "no id"}])
        provider = TodoProvider(store)
        assert [r.label for r in provider.list()] == ["ok"]

    def test_mutations_keep_malformed_records(self, store):
        store.set("todos", [{"label": "ok", "id": "1"}, "junk", {"label": "no id"}])
        provider = TodoProvider(store, id_factory=lambda: "2")
        provider.add("new")
        provider.remove("1")
        assert store.get("todos") == [
            "junk",
            {"label": "no id"},
            {"id": "2", "label": "new", "completed": False},
        ]

    def test_mutation_rejects_non_list_value(self, store):
        store.set("todos", {"id": "1"})
        provider = TodoProvider(store)
        assert provider.list() == []
        with pytest.raises(RecordStoreError, match="not a list"):
            provider.add("x")
        assert store.get("todos") == {"id": "1"}

    def test_custom_key_and_scheme(self):
        store = MemoryRecordStore()
        provider = TodoProvider(store, key="work", scheme="worktodo")
        record = provider.add("ship it")
        assert record is not None
        assert store.get("todos") is None
        assert store.get("work")[0]["label"] == "ship it"
        [item] = provider.children(_sections(provider)[0])
        assert item.resource_uri == f"worktodo:{record.id}"

    def test_tree_item_is_identity(self, provider):
        ongoing, _ = _sections(provider)
        assert provider.tree_item(ongoing) is ongoing


class TestAdd:
    """Tests for adding todos."""

    def test_add_appends_ongoing_record(self, provider):
        record = provider.add("x")
        records = provider.list()
        assert len(records) == 1
        assert records[0].label == "x"
        assert records[0].completed is False
        assert record is not None and records[0].id == record.id

    @pytest.mark.parametrize("label", ["", "   ", "\t\n"])
    def test_add_blank_is_noop(self, provider, store, label):
        events = []
        provider.on_did_change_tree_data.subscribe(events.append)
        assert provider.add(label) is None
        assert provider.list() == []
        assert store.keys() == []
        assert events == []

    def test_add_trims_label(self, provider):
        provider.add("  buy milk  ")
        assert provider.list()[0].label == "buy milk"

    def test_rapid_adds_get_unique_ids(self, provider):
        for i in range(200):
            provider.add(f"todo {i}")
        ids = [r.id for r in provider.list()]
        assert len(set(ids)) == 200

    def test_id_collision_is_retried(self, store):
        ids = iter(["dup", "dup", "fresh"])
        provider = TodoProvider(store, id_factory=lambda: next(ids))
        first = provider.add("one")
        second = provider.add("two")
        assert first is not None and first.id == "dup"
        assert second is not None and second.id == "fresh"

    def test_add_fires_change(self, provider):
        events = []
        provider.on_did_change_tree_data.subscribe(events.append)
        provider.add("x")
        assert events == [None]


class TestRemove:
    """Tests for removing todos."""

    def test_remove_existing(self, provider, seed):
        seed(("a", False), ("b", True))
        provider.remove("id-0")
        assert [r.id for r in provider.list()] == ["id-1"]

    def test_remove_unknown_is_noop(self, provider, seed):
        seed(("a", False))
        provider.remove("missing")
        assert [r.id for r in provider.list()] == ["id-0"]

    def test_remove_fires_change(self, provider, seed):
        seed(("a", False))
        events = []
        provider.on_did_change_tree_data.subscribe(events.append)
        provider.remove("id-0")
        assert events == [None]


class TestToggle:
    """Tests for completion toggling."""

    def test_toggle_moves_between_sections(self, provider, seed):
        seed(("a", False))
        provider.toggle_complete("id-0")
        ongoing, completed = _sections(provider)
        assert provider.children(ongoing) == []
        assert _ids(provider.children(completed)) == ["id-0"]

    def test_toggle_twice_restores(self, provider, seed):
        seed(("a", False), ("b", True))
        before = provider.list()
        provider.toggle_complete("id-1")
        provider.toggle_complete("id-1")
        assert provider.list() == before

    def test_undo_complete_is_alias(self, provider, seed):
        seed(("a", True))
        provider.undo_complete("id-0")
        assert provider.list()[0].completed is False
        provider.undo_complete("id-0")
        assert provider.list()[0].completed is True

    def test_toggle_unknown_is_noop(self, provider, seed):
        seed(("a", False))
        provider.toggle_complete("missing")
        assert provider.list()[0].completed is False


class TestRename:
    """Tests for renaming todos."""

    def test_rename_trims(self, provider, seed):
        seed(("old", False))
        provider.rename("id-0", " new ")
        assert provider.list()[0].label == "new"

    @pytest.mark.parametrize("label", ["", "   "])
    def test_rename_blank_keeps_label(self, provider, seed, label):
        seed(("old", False))
        events = []
        provider.on_did_change_tree_data.subscribe(events.append)
        provider.rename("id-0", label)
        assert provider.list()[0].label == "old"
        assert events == []

    def test_rename_unknown_is_noop(self, provider, seed):
        seed(("old", False))
        provider.rename("missing", "new")
        assert provider.list()[0].label == "old"


class TestExpansion:
    """Tests for section expansion state."""

    def test_set_expansion_survives_refresh(self, provider):
        provider.set_expansion(SectionKind.COMPLETED, ExpansionState.EXPANDED)
        provider.set_expansion(SectionKind.ONGOING, ExpansionState.COLLAPSED)
        provider.refresh()
        ongoing, completed = _sections(provider)
        assert ongoing.expansion is ExpansionState.COLLAPSED
        assert completed.expansion is ExpansionState.EXPANDED
        assert provider.expansion(SectionKind.COMPLETED) is ExpansionState.EXPANDED

    def test_expansion_not_persisted(self, provider, store):
        provider.set_expansion(SectionKind.COMPLETED, ExpansionState.EXPANDED)
        assert store.keys() == []
        fresh = TodoProvider(store)
        assert fresh.completed_state is ExpansionState.COLLAPSED

    def test_constructor_overrides_defaults(self, store):
        provider = TodoProvider(
            store,
            ongoing=ExpansionState.COLLAPSED,
            completed=ExpansionState.EXPANDED,
        )
        ongoing, completed = _sections(provider)
        assert ongoing.expansion is ExpansionState.COLLAPSED
        assert completed.expansion is ExpansionState.EXPANDED


def test_refresh_fires_without_writing(provider, store):
    events = []
    provider.on_did_change_tree_data.subscribe(events.append)
    provider.refresh()
    assert events == [None]
    assert store.keys() == []


def test_add_toggle_remove_scenario(provider):
    record = provider.add("buy milk")
    assert record is not None
    assert [(r.label, r.completed) for r in provider.list()] == [("buy milk", False)]

    provider.toggle_complete(record.id)
    ongoing, completed = _sections(provider)
    assert _ids(provider.children(completed)) == [record.id]
    assert provider.children(ongoing) == []

    provider.remove(record.id)
    ongoing, completed = _sections(provider)
    assert provider.children(ongoing) == []
    assert provider.children(completed) == []


def test_each_mutation_writes_once(seed, store):
    seed(("a", False))
    writes = []
    original_set = store.set

    def counting_set(key, value):
        writes.append(key)
        original_set(key, value)

    store.set = counting_set
    provider = TodoProvider(store)
    provider.add("b")
    provider.toggle_complete("id-0")
    provider.rename("id-0", "renamed")
    provider.remove("id-0")
    assert writes == ["todos"] * 4

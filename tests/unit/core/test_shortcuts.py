"""Tests for the built-in table and shortcut resolution."""

import pytest

from openapp.core.shortcuts import (
    BUILT_IN_SHORTCUTS,
    list_shortcut_entries,
    merge_shortcuts,
    resolve,
)
from openapp.core.types import Config
from openapp.core.validation import validate_shortcut_name, validate_url
from openapp.gateway.config_store.fake import FakeConfigStore


def test_built_in_table_is_immutable() -> None:
    with pytest.raises(TypeError):
        BUILT_IN_SHORTCUTS["evil"] = "https://evil.example/"  # type: ignore[index]


def test_built_in_entries_are_valid_and_canonical() -> None:
    for name, url in BUILT_IN_SHORTCUTS.items():
        assert validate_shortcut_name(name) == name
        assert validate_url(url) == url


def test_resolve_contains_built_ins_and_custom() -> None:
    store = FakeConfigStore(
        config=Config(custom_shortcuts={"jira": "https://jira.example.com/"})
    )

    table = resolve(store)

    assert table.lookup("github") == "https://github.com/"
    assert table.lookup("jira") == "https://jira.example.com/"
    assert len(table) == len(BUILT_IN_SHORTCUTS) + 1


def test_lookup_missing_returns_none() -> None:
    table = resolve(FakeConfigStore())

    assert table.lookup("nope") is None
    assert "nope" not in table


def test_lookup_has_no_inherited_members() -> None:
    """Attribute names of the mapping type are not shortcuts."""
    table = resolve(FakeConfigStore())

    assert table.lookup("__class__") is None
    assert table.lookup("keys") is None


def test_hand_edited_custom_entry_shadows_built_in() -> None:
    config = Config(custom_shortcuts={"github": "https://github.example.org/"})

    table = merge_shortcuts(config)

    assert table.lookup("github") == "https://github.example.org/"
    assert len(table) == len(BUILT_IN_SHORTCUTS)


def test_list_entries_counts_both_sources_sorted() -> None:
    config = Config(
        custom_shortcuts={"zzz": "https://z.example/", "aaa": "https://a.example/"}
    )

    entries = list_shortcut_entries(config, include_built_in=True, include_custom=True)

    assert len(entries) == len(BUILT_IN_SHORTCUTS) + 2
    names = [entry.name for entry in entries]
    assert names == sorted(names)
    assert entries[0].name == "aaa"
    assert entries[0].kind == "custom"


def test_list_entries_built_in_only() -> None:
    config = Config(custom_shortcuts={"jira": "https://jira.example.com/"})

    entries = list_shortcut_entries(config, include_built_in=True, include_custom=False)

    assert len(entries) == len(BUILT_IN_SHORTCUTS)
    assert all(entry.kind == "built-in" for entry in entries)


def test_list_entries_custom_only() -> None:
    config = Config(custom_shortcuts={"jira": "https://jira.example.com/"})

    entries = list_shortcut_entries(config, include_built_in=False, include_custom=True)

    assert [(e.name, e.url, e.kind) for e in entries] == [
        ("jira", "https://jira.example.com/", "custom")
    ]


def test_list_entries_keeps_shadowed_duplicates() -> None:
    config = Config(custom_shortcuts={"github": "https://github.example.org/"})

    entries = list_shortcut_entries(config, include_built_in=True, include_custom=True)

    github_rows = [entry for entry in entries if entry.name == "github"]
    assert [row.kind for row in github_rows] == ["built-in", "custom"]

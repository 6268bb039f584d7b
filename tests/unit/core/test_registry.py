"""Tests for registry parsing, lookup and listing."""

import pytest

from blazinit.core.errors import MalformedError, NotFoundError
from blazinit.core.registry import (
    InMemoryRegistryStore,
    dependencies_of,
    list_packages,
    lookup_package,
    parse_registry,
)
from tests.fakes.registries import MALFORMED_ENTRY_REGISTRY, SAMPLE_REGISTRY


def _store(local: str | None) -> InMemoryRegistryStore:
    return InMemoryRegistryStore(bundled=SAMPLE_REGISTRY, local=local)


def test_parse_registry_reads_version_and_package_tables() -> None:
    registry = parse_registry(SAMPLE_REGISTRY.encode("utf-8"), "test")

    assert registry.version == "1.0.0"
    assert registry.names() == ["git", "neovim", "ripgrep", "rustup"]


def test_parse_registry_ignores_non_table_keys() -> None:
    content = b'version = "1"\nmaintainer = "someone"\n[git]\n'
    registry = parse_registry(content, "test")

    assert registry.names() == ["git"]


def test_parse_registry_requires_string_version() -> None:
    with pytest.raises(MalformedError, match="version"):
        parse_registry(b"version = 3\n", "test")


def test_parse_registry_rejects_invalid_toml() -> None:
    with pytest.raises(MalformedError, match="Failed to parse TOML"):
        parse_registry(b"[unclosed\n", "test")


def test_entry_maps_packages_table_to_installers() -> None:
    registry = parse_registry(SAMPLE_REGISTRY.encode("utf-8"), "test")

    entry = registry.entry("git")

    assert entry.installers == {
        "apt": "sudo apt install -y git",
        "brew": "brew install git",
    }
    assert entry.label == "Git"


def test_entry_defaults_optional_fields() -> None:
    registry = parse_registry(b'version = "1"\n[bare]\n', "test")

    entry = registry.entry("bare")

    assert entry.display is None
    assert entry.detect is None
    assert entry.installers == {}
    assert entry.dependencies == []
    assert entry.label == "bare"


def test_lookup_is_case_sensitive() -> None:
    store = _store(SAMPLE_REGISTRY)

    with pytest.raises(NotFoundError, match="'Git' not found"):
        lookup_package(store, "Git")


def test_lookup_without_local_registry_raises_not_found() -> None:
    store = _store(None)

    with pytest.raises(NotFoundError):
        lookup_package(store, "git")


def test_lookup_with_unparsable_registry_raises_not_found() -> None:
    store = _store("this is not toml = = =")

    with pytest.raises(NotFoundError):
        lookup_package(store, "git")


def test_lookup_with_malformed_entry_raises_malformed() -> None:
    store = _store(MALFORMED_ENTRY_REGISTRY)

    with pytest.raises(MalformedError, match="'bad'"):
        lookup_package(store, "bad")


def test_dependencies_of_returns_declared_list() -> None:
    store = _store(SAMPLE_REGISTRY)

    assert dependencies_of(store, "neovim") == ["git", "ripgrep"]
    assert dependencies_of(store, "ripgrep") == []


def test_list_packages_sorted_by_name() -> None:
    store = _store(SAMPLE_REGISTRY)

    names = [entry.name for entry in list_packages(store)]

    assert names == ["git", "neovim", "ripgrep", "rustup"]


def test_list_packages_filters_on_name_and_display() -> None:
    store = _store(SAMPLE_REGISTRY)

    assert [e.name for e in list_packages(store, "RIP")] == ["ripgrep"]
    assert [e.name for e in list_packages(store, "toolchain")] == ["rustup"]
    assert list_packages(store, "emacs") == []


def test_list_packages_skips_malformed_entries() -> None:
    store = _store(MALFORMED_ENTRY_REGISTRY)

    assert [e.name for e in list_packages(store)] == ["good"]


def test_entry_reads_installers_only_from_packages_table() -> None:
    """An `installers` table is not the on-disk key and is not picked up."""
    content = b'version = "1"\n[git]\n[git.installers]\napt = "sudo apt install -y git"\n'
    registry = parse_registry(content, "test")

    assert registry.entry("git").installers == {}


def test_list_packages_query_matches_name_when_display_absent() -> None:
    store = _store('version = "1"\n[bare-tool]\n[other]\ndisplay = "Other"\n')

    assert [e.name for e in list_packages(store, "BARE")] == ["bare-tool"]

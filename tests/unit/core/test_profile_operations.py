"""Tests for profile operations against in-memory and filesystem stores."""

from pathlib import Path

import pytest

from blazinit.core.config_store import BlazinitConfig, InMemoryConfigStore
from blazinit.core.errors import (
    AlreadyExistsError,
    NotFoundError,
    ProtectedResourceError,
)
from blazinit.core.profile import (
    FilesystemProfileStore,
    InMemoryProfileStore,
    Profile,
    ProfilePackage,
)
from blazinit.core.profile.operations import (
    add_package,
    available_installers,
    create_profile,
    delete_profile,
    ensure_default_profile,
    plan_install,
    remove_package,
    set_default_profile,
)
from blazinit.core.registry import InMemoryRegistryStore
from tests.fakes.registries import (
    CHAIN_REGISTRY,
    CYCLE_REGISTRY,
    MISSING_DEP_REGISTRY,
    ORDERING_REGISTRY,
    SAMPLE_REGISTRY,
)


def _registry(content: str) -> InMemoryRegistryStore:
    return InMemoryRegistryStore(bundled=content, local=content)


def _empty_profile_store(name: str = "work") -> InMemoryProfileStore:
    return InMemoryProfileStore([Profile(name=name, packages=[])])


def test_create_profile_persists_empty_profile() -> None:
    store = InMemoryProfileStore()

    create_profile(store, "work")

    assert store.profiles["work"].packages == []


def test_create_profile_rejects_duplicate() -> None:
    store = _empty_profile_store()

    with pytest.raises(AlreadyExistsError, match="Profile 'work' already exists"):
        create_profile(store, "work")


def test_create_profile_rejects_invalid_name() -> None:
    store = InMemoryProfileStore()

    with pytest.raises(ValueError):
        create_profile(store, "../etc")

    assert store.save_count == 0


def test_ensure_default_profile_creates_once() -> None:
    store = InMemoryProfileStore()
    config = BlazinitConfig()

    assert ensure_default_profile(store, config)
    assert not ensure_default_profile(store, config)
    assert store.list_names() == ["default"]


def test_delete_default_profile_is_forbidden() -> None:
    store = _empty_profile_store("default")

    with pytest.raises(ProtectedResourceError, match="default profile"):
        delete_profile(store, "default", BlazinitConfig())

    assert store.exists("default")


def test_delete_protects_configured_default_even_when_missing() -> None:
    store = InMemoryProfileStore()

    with pytest.raises(ProtectedResourceError):
        delete_profile(store, "work", BlazinitConfig(default_profile="work"))


def test_delete_non_default_profile() -> None:
    store = InMemoryProfileStore(
        [Profile(name="default", packages=[]), Profile(name="work", packages=[])]
    )

    delete_profile(store, "work", BlazinitConfig())

    assert store.list_names() == ["default"]


def test_delete_missing_profile_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        delete_profile(InMemoryProfileStore(), "ghost", BlazinitConfig())


def test_set_default_profile_requires_existing_profile() -> None:
    config_store = InMemoryConfigStore()

    with pytest.raises(NotFoundError):
        set_default_profile(config_store, InMemoryProfileStore(), "ghost")

    assert not config_store.exists()


def test_set_default_profile_saves_config() -> None:
    config_store = InMemoryConfigStore()

    config = set_default_profile(config_store, _empty_profile_store(), "work")

    assert config.default_profile == "work"
    assert config_store.load().default_profile == "work"


def test_add_package_adds_transitive_closure() -> None:
    store = _empty_profile_store()

    report = add_package(store, _registry(CHAIN_REGISTRY), "work", "A")

    assert sorted(p.name for p in report.added) == ["A", "B", "C"]
    assert [p.name for p in store.profiles["work"].packages] == ["A", "B", "C"]


def test_add_package_handles_cycles() -> None:
    store = _empty_profile_store()

    add_package(store, _registry(CYCLE_REGISTRY), "work", "A")

    assert [p.name for p in store.profiles["work"].packages] == ["A", "B"]


def test_add_package_skips_missing_dependency() -> None:
    store = _empty_profile_store()

    report = add_package(store, _registry(MISSING_DEP_REGISTRY), "work", "A")

    assert report.missing == ["B"]
    assert [p.name for p in store.profiles["work"].packages] == ["A"]


def test_add_package_already_present_does_not_save() -> None:
    store = _empty_profile_store()
    registry = _registry(SAMPLE_REGISTRY)
    add_package(store, registry, "work", "neovim")
    saves = store.save_count

    report = add_package(store, registry, "work", "git")

    assert report.nothing_new
    assert store.save_count == saves


def test_add_package_already_present_leaves_file_byte_identical(tmp_path: Path) -> None:
    store = FilesystemProfileStore(tmp_path)
    create_profile(store, "work")
    registry = _registry(SAMPLE_REGISTRY)
    add_package(store, registry, "work", "neovim")
    path = store.profile_path("work")
    before = path.read_bytes()
    before_mtime = path.stat().st_mtime_ns

    report = add_package(store, registry, "work", "neovim")

    assert report.nothing_new
    assert path.read_bytes() == before
    assert path.stat().st_mtime_ns == before_mtime


def test_add_package_persists_sorted_order() -> None:
    store = _empty_profile_store()
    registry = _registry(ORDERING_REGISTRY)

    add_package(store, registry, "work", "Z")
    add_package(store, registry, "work", "A")

    assert [p.name for p in store.profiles["work"].packages] == ["A", "Z"]


def test_add_package_keeps_existing_snapshot() -> None:
    """Packages already in the profile are not refreshed from the registry."""
    stale_git = ProfilePackage(name="git", display="Old Git")
    store = InMemoryProfileStore([Profile(name="work", packages=[stale_git])])

    add_package(store, _registry(SAMPLE_REGISTRY), "work", "neovim")

    packages = {p.name: p for p in store.profiles["work"].packages}
    assert packages["git"].display == "Old Git"
    assert set(packages) == {"git", "neovim", "ripgrep"}


def test_add_package_to_missing_profile_raises() -> None:
    with pytest.raises(NotFoundError):
        add_package(InMemoryProfileStore(), _registry(SAMPLE_REGISTRY), "ghost", "git")


def test_remove_package_keeps_dependencies() -> None:
    store = _empty_profile_store()
    add_package(store, _registry(SAMPLE_REGISTRY), "work", "neovim")

    remove_package(store, "work", "neovim")

    assert [p.name for p in store.profiles["work"].packages] == ["git", "ripgrep"]


def test_remove_package_not_in_profile_raises() -> None:
    store = _empty_profile_store()

    with pytest.raises(NotFoundError, match="not in profile 'work'"):
        remove_package(store, "work", "git")


def test_plan_install_collects_commands_in_profile_order() -> None:
    store = _empty_profile_store()
    add_package(store, _registry(SAMPLE_REGISTRY), "work", "neovim")
    add_package(store, _registry(SAMPLE_REGISTRY), "work", "rustup")
    profile = store.load("work")

    plan = plan_install(profile, "brew")

    assert [step.package for step in plan.steps] == ["git", "neovim", "ripgrep"]
    assert plan.steps[0].command == "brew install git"
    assert plan.unsupported == ["rustup"]


def test_available_installers() -> None:
    store = _empty_profile_store()
    add_package(store, _registry(SAMPLE_REGISTRY), "work", "rustup")
    add_package(store, _registry(SAMPLE_REGISTRY), "work", "git")

    assert available_installers(store.load("work")) == ["apt", "brew", "script"]

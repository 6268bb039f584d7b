"""Package definition lookup against the local registry."""

import logging

from blazinit.core.errors import MalformedError, NotFoundError
from blazinit.core.registry.abc import RegistryStore
from blazinit.core.registry.types import Registry, RegistryEntry, parse_registry

logger = logging.getLogger(__name__)


def load_local_registry(store: RegistryStore) -> Registry:
    """Read and parse the local (post-sync) registry.

    Raises:
        NotFoundError: If there is no local registry yet
        MalformedError: If the local registry cannot be parsed
        IOFailureError: If the local registry cannot be read
    """
    content = store.read_local()
    if content is None:
        raise NotFoundError(f"Local registry not found at {store.local_path()}")
    return parse_registry(content, str(store.local_path()))


def lookup_package(store: RegistryStore, name: str) -> RegistryEntry:
    """Return the registry entry whose key equals name exactly.

    The local registry is re-read on every call.

    Raises:
        NotFoundError: If the package is absent or the registry cannot be parsed
        MalformedError: If the package entry has the wrong shape
    """
    try:
        registry = load_local_registry(store)
    except MalformedError as e:
        raise NotFoundError(f"Package '{name}' not found: {e}") from e

    return registry.entry(name)


def dependencies_of(store: RegistryStore, name: str) -> list[str]:
    """Declared direct dependencies of a package (empty when the field is absent).

    Raises:
        NotFoundError: If the package is absent or the registry cannot be parsed
        MalformedError: If `dependencies` is present but not a list of strings
    """
    return list(lookup_package(store, name).dependencies)


def list_packages(store: RegistryStore, query: str | None = None) -> list[RegistryEntry]:
    """List registry entries sorted by name, optionally filtered.

    The query matches case-insensitively against the package name and display
    label. Entries with an invalid shape are skipped.
    """
    registry = load_local_registry(store)
    needle = query.lower() if query else None

    entries: list[RegistryEntry] = []
    for name in registry.names():
        try:
            entry = registry.entry(name)
        except MalformedError as e:
            logger.debug("Skipping malformed registry entry: %s", e)
            continue

        if needle is not None:
            haystack = f"{entry.name}\n{entry.label}".lower()
            if needle not in haystack:
                continue

        entries.append(entry)

    return entries

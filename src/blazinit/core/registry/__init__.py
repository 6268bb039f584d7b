from blazinit.core.registry.abc import RegistryStore
from blazinit.core.registry.fake import InMemoryRegistryStore
from blazinit.core.registry.lookup import (
    dependencies_of,
    list_packages,
    load_local_registry,
    lookup_package,
)
from blazinit.core.registry.real import FilesystemRegistryStore
from blazinit.core.registry.sync import SyncResult, sync_registry_if_stale
from blazinit.core.registry.types import Registry, RegistryEntry, parse_registry

__all__ = [
    "FilesystemRegistryStore",
    "InMemoryRegistryStore",
    "Registry",
    "RegistryEntry",
    "RegistryStore",
    "SyncResult",
    "dependencies_of",
    "list_packages",
    "load_local_registry",
    "lookup_package",
    "parse_registry",
    "sync_registry_if_stale",
]

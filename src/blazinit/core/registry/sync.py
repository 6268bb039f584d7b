"""Version-driven synchronization of the local registry cache."""

import logging
from dataclasses import dataclass

from blazinit.core.errors import IOFailureError, MalformedError
from blazinit.core.registry.abc import RegistryStore
from blazinit.core.registry.types import read_registry_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncResult:
    """Result of syncing the local registry with the bundled one."""

    old_version: str | None  # None when the local copy was missing or unreadable
    new_version: str
    was_updated: bool


def current_registry_version(store: RegistryStore) -> str | None:
    """Version of the local registry, or None if it is missing, unreadable or unparsable."""
    try:
        content = store.read_local()
    except IOFailureError as e:
        logger.debug("Treating local registry as absent: %s", e)
        return None

    if content is None:
        return None

    try:
        return read_registry_version(content, str(store.local_path()))
    except MalformedError as e:
        logger.debug("Treating local registry as absent: %s", e)
        return None


def sync_registry_if_stale(store: RegistryStore) -> SyncResult:
    """Overwrite the local registry with the bundled one when versions differ.

    Versions are opaque strings compared for equality only. On mismatch the
    local file is replaced wholesale (never merged), so user edits are lost.
    When versions match the local file is left untouched, extra fields included.

    Raises:
        MalformedError: If the bundled registry is missing or malformed
        IOFailureError: If the local registry cannot be written
    """
    bundled = store.read_bundled()
    bundled_version = read_registry_version(bundled, "bundled registry")
    current_version = current_registry_version(store)

    if current_version == bundled_version:
        logger.debug("Local registry is current (version %s)", current_version)
        return SyncResult(
            old_version=current_version,
            new_version=bundled_version,
            was_updated=False,
        )

    logger.debug(
        "Replacing local registry: version %s -> %s", current_version, bundled_version
    )
    store.write_local(bundled)
    return SyncResult(
        old_version=current_version,
        new_version=bundled_version,
        was_updated=True,
    )

"""Transitive dependency resolution for profile additions."""

import logging
from collections.abc import Callable, Set
from dataclasses import dataclass

from blazinit.core.errors import NotFoundError
from blazinit.core.profile.types import ProfilePackage
from blazinit.core.registry.types import RegistryEntry

logger = logging.getLogger(__name__)

PackageLookup = Callable[[str], RegistryEntry]


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one requested package.

    Attributes:
        packages: New snapshots to add, in the order they were resolved
        missing: Names that could not be found in the registry (skipped, not fatal)
    """

    packages: list[ProfilePackage]
    missing: list[str]

    @property
    def is_empty(self) -> bool:
        return not self.packages


def resolve(requested: str, existing_names: Set[str], lookup: PackageLookup) -> Resolution:
    """Compute the packages to add for requested, given what a profile already holds.

    Walks the dependency graph with an explicit stack. A name already in
    existing_names or already resolved in this call is skipped, which also makes
    cycles terminate. A name the lookup cannot find is recorded in
    Resolution.missing and its subtree is dropped; the rest of the walk goes on.

    Args:
        requested: Package name to add
        existing_names: Names already in the target profile (treated as satisfied)
        lookup: Returns the registry entry for a name, raising NotFoundError when absent

    Raises:
        MalformedError: If a registry entry encountered during the walk is invalid
    """
    worklist = [requested]
    processed: set[str] = set()
    missing: list[str] = []
    resolved: list[ProfilePackage] = []

    while worklist:
        name = worklist.pop()

        if name in existing_names or name in processed:
            continue

        try:
            entry = lookup(name)
        except NotFoundError as e:
            logger.debug("Skipping unresolved package %s: %s", name, e)
            if name not in missing:
                missing.append(name)
            continue

        processed.add(name)
        resolved.append(ProfilePackage.from_entry(entry))
        logger.debug("Resolved %s (dependencies: %s)", name, entry.dependencies)

        worklist.extend(entry.dependencies)

    return Resolution(packages=resolved, missing=missing)

"""Profile mutations: create, delete, add (with dependency resolution), remove."""

import logging
from dataclasses import dataclass

from blazinit.core.config_store import BlazinitConfig, ConfigStore
from blazinit.core.errors import AlreadyExistsError, NotFoundError, ProtectedResourceError
from blazinit.core.profile.abc import ProfileStore
from blazinit.core.profile.types import Profile, ProfilePackage, validate_profile_name
from blazinit.core.registry.abc import RegistryStore
from blazinit.core.registry.lookup import lookup_package
from blazinit.core.resolver import resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddReport:
    """Result of adding a package to a profile.

    Attributes:
        profile_name: Profile that was targeted
        requested: Package name the user asked for
        added: Newly added packages in resolution order (display only; the
            persisted order is always sorted by name)
        missing: Dependencies that were not found in the registry and skipped
    """

    profile_name: str
    requested: str
    added: list[ProfilePackage]
    missing: list[str]

    @property
    def nothing_new(self) -> bool:
        return not self.added


@dataclass(frozen=True)
class InstallStep:
    package: str
    command: str


@dataclass(frozen=True)
class InstallPlan:
    """Commands a profile would run for one installer. Nothing is executed."""

    profile_name: str
    installer: str
    steps: list[InstallStep]
    unsupported: list[str]  # Packages with no command for this installer


def read_profile(store: ProfileStore, name: str) -> Profile:
    """Load a profile by name.

    Raises:
        NotFoundError: If the profile does not exist
        MalformedError: If the stored profile is invalid
    """
    return store.load(name)


def list_profiles(store: ProfileStore) -> list[str]:
    return store.list_names()


def create_profile(store: ProfileStore, name: str) -> Profile:
    """Create and persist an empty profile.

    Raises:
        ValueError: If the name cannot be used as a storage key
        AlreadyExistsError: If a profile with that name exists
    """
    validate_profile_name(name)
    if store.exists(name):
        raise AlreadyExistsError(f"Profile '{name}' already exists")

    profile = Profile(name=name, packages=[])
    store.save(profile)
    logger.debug("Created profile %s", name)
    return profile


def ensure_default_profile(store: ProfileStore, config: BlazinitConfig) -> bool:
    """Create the configured default profile if it is missing.

    Returns:
        True if the profile was created, False if it already existed
    """
    if store.exists(config.default_profile):
        return False

    create_profile(store, config.default_profile)
    return True


def set_default_profile(
    config_store: ConfigStore, profile_store: ProfileStore, name: str
) -> BlazinitConfig:
    """Make an existing profile the default and persist the config.

    Raises:
        NotFoundError: If the profile does not exist
    """
    if not profile_store.exists(name):
        raise NotFoundError(f"Profile '{name}' does not exist")

    config = BlazinitConfig(default_profile=name)
    config_store.save(config)
    return config


def delete_profile(store: ProfileStore, name: str, config: BlazinitConfig) -> None:
    """Delete a profile.

    The configured default profile can never be deleted, even when empty.

    Raises:
        ProtectedResourceError: If name is the default profile
        NotFoundError: If the profile does not exist
    """
    if name == config.default_profile:
        raise ProtectedResourceError(f"Cannot delete the default profile '{name}'")

    store.delete(name)
    logger.debug("Deleted profile %s", name)


def add_package(
    profile_store: ProfileStore,
    registry_store: RegistryStore,
    profile_name: str,
    package_name: str,
) -> AddReport:
    """Add a package and its transitive dependencies to a profile.

    Packages already in the profile are left as they are. When nothing new is
    resolved the profile is not rewritten at all. Otherwise the merged package
    list is sorted by name and persisted in one atomic write.

    Raises:
        NotFoundError: If the profile does not exist
        MalformedError: If the profile or a resolved registry entry is invalid
    """
    profile = profile_store.load(profile_name)

    resolution = resolve(
        package_name,
        profile.package_names(),
        lambda name: lookup_package(registry_store, name),
    )

    if resolution.is_empty:
        logger.debug("Nothing new to add for %s in profile %s", package_name, profile_name)
        return AddReport(
            profile_name=profile_name,
            requested=package_name,
            added=[],
            missing=resolution.missing,
        )

    updated = profile.with_packages([*profile.packages, *resolution.packages])
    profile_store.save(updated)
    logger.debug(
        "Added %d package(s) to profile %s", len(resolution.packages), profile_name
    )

    return AddReport(
        profile_name=profile_name,
        requested=package_name,
        added=resolution.packages,
        missing=resolution.missing,
    )


def remove_package(store: ProfileStore, profile_name: str, package_name: str) -> Profile:
    """Remove one package from a profile.

    Only the named package is removed; dependencies it pulled in stay.

    Raises:
        NotFoundError: If the profile does not exist or does not contain the package
    """
    profile = store.load(profile_name)
    if package_name not in profile.package_names():
        raise NotFoundError(f"Package '{package_name}' is not in profile '{profile_name}'")

    updated = profile.with_packages([p for p in profile.packages if p.name != package_name])
    store.save(updated)
    return updated


def plan_install(profile: Profile, installer: str) -> InstallPlan:
    """Collect the commands each package declares for installer, in profile order."""
    steps: list[InstallStep] = []
    unsupported: list[str] = []

    for pkg in profile.packages:
        command = pkg.installers.get(installer)
        if command is None:
            unsupported.append(pkg.name)
            continue
        steps.append(InstallStep(package=pkg.name, command=command))

    return InstallPlan(
        profile_name=profile.name,
        installer=installer,
        steps=steps,
        unsupported=unsupported,
    )


def available_installers(profile: Profile) -> list[str]:
    """Installer names declared by any package in the profile, sorted."""
    return sorted({installer for pkg in profile.packages for installer in pkg.installers})

"""Profile data types and TOML (de)serialization."""

import re

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from blazinit.core.errors import MalformedError
from blazinit.core.registry.types import RegistryEntry
from blazinit.core.schema import describe_validation_error, parse_toml

_INVALID_NAME_CHARS = re.compile(r"[/\\\x00]")


class ProfilePackage(BaseModel):
    """Point-in-time snapshot of a registry entry, stored inside a profile.

    Snapshots are never refreshed from the registry once written; later
    registry changes do not affect packages already in a profile.
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    display: StrictStr | None = None
    installers: dict[StrictStr, StrictStr] = Field(default_factory=dict)
    detect: StrictStr | None = None
    dependencies: list[StrictStr] = Field(default_factory=list)

    @classmethod
    def from_entry(cls, entry: RegistryEntry) -> "ProfilePackage":
        """Snapshot a registry entry (copies the mutable containers)."""
        return cls(
            name=entry.name,
            display=entry.display,
            installers=dict(entry.installers),
            detect=entry.detect,
            dependencies=list(entry.dependencies),
        )

    @property
    def label(self) -> str:
        """Display name, falling back to the package key."""
        return self.display if self.display is not None else self.name


class Profile(BaseModel):
    """A named set of packages. Package names are unique within a profile."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    packages: list[ProfilePackage] = Field(default_factory=list)

    def package_names(self) -> set[str]:
        return {pkg.name for pkg in self.packages}

    def with_packages(self, packages: list[ProfilePackage]) -> "Profile":
        """Return a new profile holding packages sorted lexicographically by name."""
        return Profile(name=self.name, packages=sorted(packages, key=lambda p: p.name))


def validate_profile_name(name: str) -> str:
    """Check that name can be used as a profile storage key.

    Raises:
        ValueError: If the name is empty, hidden, or contains path separators
    """
    if not name or not name.strip():
        raise ValueError("Profile name cannot be empty")
    if name.startswith("."):
        raise ValueError(f"Invalid profile name '{name}': cannot start with '.'")
    if _INVALID_NAME_CHARS.search(name):
        raise ValueError(f"Invalid profile name '{name}': cannot contain path separators")
    return name


def parse_profile(content: bytes, expected_name: str, source: str) -> Profile:
    """Parse and validate a profile document.

    Args:
        content: Raw TOML bytes
        expected_name: Storage key the profile was loaded under
        source: Human-readable origin for error messages

    Raises:
        MalformedError: On invalid TOML, a shape mismatch, duplicate package
            names, or a `name` that does not match the storage key
    """
    data = parse_toml(content, source)

    try:
        profile = Profile.model_validate(data)
    except ValidationError as e:
        raise MalformedError(
            f"Profile {source} is malformed: {describe_validation_error(e)}"
        ) from e

    if profile.name != expected_name:
        raise MalformedError(
            f"Profile {source} declares name '{profile.name}', expected '{expected_name}'"
        )

    seen: set[str] = set()
    for pkg in profile.packages:
        if pkg.name in seen:
            raise MalformedError(f"Profile {source} lists package '{pkg.name}' more than once")
        seen.add(pkg.name)

    return profile


def serialize_profile(profile: Profile) -> bytes:
    """Render a profile as TOML bytes. Absent optional fields are omitted."""
    data = {
        "name": profile.name,
        "packages": [pkg.model_dump(exclude_none=True) for pkg in profile.packages],
    }
    return tomli_w.dumps(data).encode("utf-8")

"""Filesystem-backed profile store: one TOML file per profile."""

import logging
from pathlib import Path

from blazinit.core.atomic import atomic_write_bytes
from blazinit.core.errors import IOFailureError, NotFoundError
from blazinit.core.paths import PROFILES_DIRNAME
from blazinit.core.profile.abc import ProfileStore
from blazinit.core.profile.types import (
    Profile,
    parse_profile,
    serialize_profile,
    validate_profile_name,
)

logger = logging.getLogger(__name__)


class FilesystemProfileStore(ProfileStore):
    """Production implementation storing <config_dir>/profiles/<name>.toml."""

    def __init__(self, config_dir: Path) -> None:
        self.profiles_dir = config_dir / PROFILES_DIRNAME

    def profile_path(self, name: str) -> Path:
        """Path for a profile file; rejects names that would escape profiles_dir."""
        validate_profile_name(name)
        return self.profiles_dir / f"{name}.toml"

    def exists(self, name: str) -> bool:
        return self.profile_path(name).is_file()

    def load(self, name: str) -> Profile:
        path = self.profile_path(name)
        if not path.is_file():
            raise NotFoundError(f"Profile '{name}' does not exist")

        try:
            content = path.read_bytes()
        except OSError as e:
            raise IOFailureError(f"Failed to read profile '{name}': {e}") from e

        logger.debug("Loaded profile %s from %s", name, path)
        return parse_profile(content, expected_name=name, source=str(path))

    def save(self, profile: Profile) -> None:
        path = self.profile_path(profile.name)
        try:
            atomic_write_bytes(path, serialize_profile(profile))
        except OSError as e:
            raise IOFailureError(f"Failed to write profile '{profile.name}': {e}") from e

    def delete(self, name: str) -> None:
        path = self.profile_path(name)
        if not path.is_file():
            raise NotFoundError(f"Profile '{name}' does not exist")

        try:
            path.unlink()
        except OSError as e:
            raise IOFailureError(f"Failed to delete profile '{name}': {e}") from e

    def list_names(self) -> list[str]:
        if not self.profiles_dir.is_dir():
            return []

        try:
            entries = list(self.profiles_dir.iterdir())
        except OSError as e:
            raise IOFailureError(f"Failed to list profiles: {e}") from e

        return sorted(
            entry.stem
            for entry in entries
            if entry.is_file() and entry.suffix == ".toml" and not entry.name.startswith(".")
        )

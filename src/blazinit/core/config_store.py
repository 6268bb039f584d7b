"""Configuration record and its storage.

The configuration names the default profile. It is loaded once at the CLI
entry point, stored in BlazinitContext, and passed explicitly to the
operations that need it.
"""

import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from blazinit.core.atomic import atomic_write_text
from blazinit.core.errors import IOFailureError, MalformedError
from blazinit.core.paths import CONFIG_FILENAME

DEFAULT_PROFILE_NAME = "default"


@dataclass(frozen=True)
class BlazinitConfig:
    """Immutable configuration data."""

    default_profile: str = DEFAULT_PROFILE_NAME


class ConfigStore(ABC):
    """Abstract interface for config operations.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if a config has been saved."""
        ...

    @abstractmethod
    def load(self) -> BlazinitConfig:
        """Load config, returning defaults if none has been saved.

        Raises:
            MalformedError: If the stored config is invalid
            IOFailureError: If the config cannot be read
        """
        ...

    @abstractmethod
    def save(self, config: BlazinitConfig) -> None:
        """Persist config.

        Raises:
            IOFailureError: If the config cannot be written
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for messages and debugging)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes <config_dir>/config.toml."""

    def __init__(self, config_dir: Path) -> None:
        self._config_dir = config_dir

    def exists(self) -> bool:
        return self.path().is_file()

    def load(self) -> BlazinitConfig:
        config_path = self.path()
        if not config_path.is_file():
            return BlazinitConfig()

        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise IOFailureError(f"Failed to read config {config_path}: {e}") from e

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise MalformedError(f"Failed to parse TOML in {config_path}: {e}") from e

        default_profile = data.get("default_profile", DEFAULT_PROFILE_NAME)
        if not isinstance(default_profile, str) or not default_profile:
            raise MalformedError(f"'default_profile' in {config_path} must be a non-empty string")

        return BlazinitConfig(default_profile=default_profile)

    def save(self, config: BlazinitConfig) -> None:
        """Save config, preserving any comments and unknown keys already in the file."""
        config_path = self.path()

        try:
            if config_path.is_file():
                doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
            else:
                doc = tomlkit.document()
                doc.add(tomlkit.comment("blazinit configuration"))
        except OSError as e:
            raise IOFailureError(f"Failed to read config {config_path}: {e}") from e
        except TOMLKitError:
            # Unparsable file is replaced rather than merged
            doc = tomlkit.document()

        doc["default_profile"] = config.default_profile

        try:
            atomic_write_text(config_path, tomlkit.dumps(doc))
        except OSError as e:
            raise IOFailureError(f"Failed to write config {config_path}: {e}") from e

    def path(self) -> Path:
        return self._config_dir / CONFIG_FILENAME


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: BlazinitConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = nothing saved yet)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> BlazinitConfig:
        if self._config is None:
            return BlazinitConfig()
        return self._config

    def save(self, config: BlazinitConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/blazinit/config.toml")

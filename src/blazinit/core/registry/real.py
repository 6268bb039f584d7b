"""Filesystem-backed registry store."""

import logging
from pathlib import Path

from blazinit.core.atomic import atomic_write_bytes
from blazinit.core.errors import IOFailureError, MalformedError
from blazinit.core.paths import BUNDLED_REGISTRY_PATH, REGISTRY_FILENAME
from blazinit.core.registry.abc import RegistryStore

logger = logging.getLogger(__name__)


class FilesystemRegistryStore(RegistryStore):
    """Production implementation reading package data and <config_dir>/registry.toml."""

    def __init__(self, config_dir: Path, bundled_path: Path = BUNDLED_REGISTRY_PATH) -> None:
        self._config_dir = config_dir
        self._bundled_path = bundled_path

    def read_bundled(self) -> bytes:
        try:
            return self._bundled_path.read_bytes()
        except FileNotFoundError:
            raise MalformedError(
                f"Bundled registry '{self._bundled_path.name}' not found at {self._bundled_path}"
            ) from None
        except OSError as e:
            raise MalformedError(f"Failed to read bundled registry: {e}") from e

    def read_local(self) -> bytes | None:
        path = self.local_path()
        if not path.exists():
            return None

        try:
            return path.read_bytes()
        except OSError as e:
            raise IOFailureError(f"Failed to read current registry: {e}") from e

    def write_local(self, content: bytes) -> None:
        path = self.local_path()
        try:
            atomic_write_bytes(path, content)
        except OSError as e:
            raise IOFailureError(f"Failed to write registry: {e}") from e
        logger.debug("Local registry replaced at %s", path)

    def local_path(self) -> Path:
        return self._config_dir / REGISTRY_FILENAME

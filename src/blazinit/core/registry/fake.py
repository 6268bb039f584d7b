"""In-memory registry store for tests."""

from pathlib import Path

from blazinit.core.errors import MalformedError
from blazinit.core.registry.abc import RegistryStore


class InMemoryRegistryStore(RegistryStore):
    """Test implementation that keeps both registries in memory.

    All state is provided via the constructor and observed through read-only
    properties; there are no setup methods.
    """

    def __init__(self, *, bundled: str | None, local: str | None = None) -> None:
        """Create the store.

        Args:
            bundled: Bundled registry TOML text (None simulates a packaging defect)
            local: Local cached registry TOML text (None = no local copy yet)
        """
        self._bundled = bundled.encode("utf-8") if bundled is not None else None
        self._local = local.encode("utf-8") if local is not None else None
        self._write_count = 0

    @property
    def local_content(self) -> str | None:
        """Current local registry text, for test assertions."""
        if self._local is None:
            return None
        return self._local.decode("utf-8")

    @property
    def write_count(self) -> int:
        """Number of times write_local() has been called."""
        return self._write_count

    def read_bundled(self) -> bytes:
        if self._bundled is None:
            raise MalformedError("Bundled registry 'registry.toml' not found")
        return self._bundled

    def read_local(self) -> bytes | None:
        return self._local

    def write_local(self, content: bytes) -> None:
        self._local = content
        self._write_count += 1

    def local_path(self) -> Path:
        return Path("/fake/blazinit/registry.toml")

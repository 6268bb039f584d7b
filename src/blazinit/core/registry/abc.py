"""Abstract interface for registry storage."""

from abc import ABC, abstractmethod
from pathlib import Path


class RegistryStore(ABC):
    """Storage for the bundled registry snapshot and its local cached copy.

    Implementations only move bytes around. Version comparison lives in
    blazinit.core.registry.sync and parsing in blazinit.core.registry.types,
    so the real and in-memory stores share the same behavior.
    """

    @abstractmethod
    def read_bundled(self) -> bytes:
        """Read the bundled reference registry.

        Raises:
            MalformedError: If the bundled registry is missing (a packaging defect)
        """
        ...

    @abstractmethod
    def read_local(self) -> bytes | None:
        """Read the local cached registry.

        Returns:
            File contents, or None if no local copy exists yet

        Raises:
            IOFailureError: If the file exists but cannot be read
        """
        ...

    @abstractmethod
    def write_local(self, content: bytes) -> None:
        """Replace the local cached registry with content.

        Raises:
            IOFailureError: If the write fails
        """
        ...

    @abstractmethod
    def local_path(self) -> Path:
        """Location of the local cached registry (for messages)."""
        ...

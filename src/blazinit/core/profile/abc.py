"""Abstract interface for profile storage."""

from abc import ABC, abstractmethod

from blazinit.core.profile.types import Profile


class ProfileStore(ABC):
    """Persistence for profiles, keyed by profile name.

    Stores do not enforce business rules (default protection, dependency
    resolution); those live in blazinit.core.profile.operations.
    """

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check whether a profile is stored under name."""
        ...

    @abstractmethod
    def load(self, name: str) -> Profile:
        """Load a profile.

        Raises:
            NotFoundError: If no profile is stored under name
            MalformedError: If the stored profile is invalid
            IOFailureError: If the profile cannot be read
        """
        ...

    @abstractmethod
    def save(self, profile: Profile) -> None:
        """Persist a profile under profile.name, replacing any previous content.

        Raises:
            IOFailureError: If the profile cannot be written
        """
        ...

    @abstractmethod
    def delete(self, name: str) -> None:
        """Remove a stored profile.

        Raises:
            NotFoundError: If no profile is stored under name
            IOFailureError: If the profile cannot be removed
        """
        ...

    @abstractmethod
    def list_names(self) -> list[str]:
        """Names of all stored profiles, sorted."""
        ...

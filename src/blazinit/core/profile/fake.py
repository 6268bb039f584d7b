"""In-memory profile store for tests."""

from blazinit.core.errors import NotFoundError
from blazinit.core.profile.abc import ProfileStore
from blazinit.core.profile.types import Profile


class InMemoryProfileStore(ProfileStore):
    """Test implementation holding profiles in a dict.

    Initial profiles come from the constructor. save_count lets tests assert
    that no-op operations did not persist anything.
    """

    def __init__(self, profiles: list[Profile] | None = None) -> None:
        self._profiles: dict[str, Profile] = {p.name: p for p in profiles or []}
        self._save_count = 0

    @property
    def profiles(self) -> dict[str, Profile]:
        """Read-only view of stored profiles for test assertions."""
        return dict(self._profiles)

    @property
    def save_count(self) -> int:
        return self._save_count

    def exists(self, name: str) -> bool:
        return name in self._profiles

    def load(self, name: str) -> Profile:
        if name not in self._profiles:
            raise NotFoundError(f"Profile '{name}' does not exist")
        return self._profiles[name]

    def save(self, profile: Profile) -> None:
        self._profiles[profile.name] = profile
        self._save_count += 1

    def delete(self, name: str) -> None:
        if name not in self._profiles:
            raise NotFoundError(f"Profile '{name}' does not exist")
        del self._profiles[name]

    def list_names(self) -> list[str]:
        return sorted(self._profiles)

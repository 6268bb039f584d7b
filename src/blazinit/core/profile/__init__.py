from blazinit.core.profile.abc import ProfileStore
from blazinit.core.profile.fake import InMemoryProfileStore
from blazinit.core.profile.real import FilesystemProfileStore
from blazinit.core.profile.types import Profile, ProfilePackage

__all__ = [
    "FilesystemProfileStore",
    "InMemoryProfileStore",
    "Profile",
    "ProfilePackage",
    "ProfileStore",
]

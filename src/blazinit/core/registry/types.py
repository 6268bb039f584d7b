"""Registry data types and parsing."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from blazinit.core.errors import MalformedError, NotFoundError
from blazinit.core.schema import describe_validation_error, parse_toml

logger = logging.getLogger(__name__)


class RegistryEntry(BaseModel):
    """Canonical definition of one package in the registry.

    On disk the installer table is stored under `packages`; in memory it is
    exposed as `installers` to match the profile snapshot shape.
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    display: StrictStr | None = None
    installers: dict[StrictStr, StrictStr] = Field(default_factory=dict, alias="packages")
    detect: StrictStr | None = None
    dependencies: list[StrictStr] = Field(default_factory=list)

    @property
    def label(self) -> str:
        """Display name, falling back to the package key."""
        return self.display if self.display is not None else self.name


@dataclass(frozen=True)
class Registry:
    """A parsed registry document.

    Package tables are kept raw and validated one at a time by entry(), so a
    single malformed package does not make the rest of the catalog unreadable.
    """

    version: str
    tables: Mapping[str, Mapping[str, Any]]
    source: str

    def names(self) -> list[str]:
        """All package names, sorted."""
        return sorted(self.tables)

    def has(self, name: str) -> bool:
        return name in self.tables

    def entry(self, name: str) -> RegistryEntry:
        """Validate and return the entry for name (exact, case-sensitive match).

        Raises:
            NotFoundError: If no package with that key exists
            MalformedError: If the package table has the wrong shape
        """
        if not self.has(name):
            raise NotFoundError(f"Package '{name}' not found in registry")

        try:
            return RegistryEntry.model_validate({**self.tables[name], "name": name})
        except ValidationError as e:
            raise MalformedError(
                f"Package '{name}' in {self.source} is malformed: {describe_validation_error(e)}"
            ) from e


def parse_registry(content: bytes, source: str) -> Registry:
    """Parse registry TOML bytes.

    The document must carry a string `version`. Every other top-level table is a
    package keyed by its name; non-table top-level values are ignored.

    Raises:
        MalformedError: If the content is not valid TOML or has no string version
    """
    data = parse_toml(content, source)

    version = data.get("version")
    if not isinstance(version, str):
        raise MalformedError(f"Registry {source} is missing a string 'version' field")

    tables: dict[str, Mapping[str, Any]] = {}
    for key, value in data.items():
        if key == "version":
            continue
        if not isinstance(value, dict):
            logger.debug("Ignoring non-table registry key %r in %s", key, source)
            continue
        tables[key] = value

    return Registry(version=version, tables=tables, source=source)


def read_registry_version(content: bytes, source: str) -> str:
    """Return the `version` field of a registry document.

    Raises:
        MalformedError: If the content cannot be parsed or has no string version
    """
    return parse_registry(content, source).version

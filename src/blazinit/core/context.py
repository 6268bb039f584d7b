"""Application context with dependency injection."""

import logging
from dataclasses import dataclass
from pathlib import Path

from blazinit.core.config_store import (
    BlazinitConfig,
    ConfigStore,
    FilesystemConfigStore,
    InMemoryConfigStore,
)
from blazinit.core.paths import default_config_dir
from blazinit.core.profile.abc import ProfileStore
from blazinit.core.profile.fake import InMemoryProfileStore
from blazinit.core.profile.operations import ensure_default_profile
from blazinit.core.profile.real import FilesystemProfileStore
from blazinit.core.registry.abc import RegistryStore
from blazinit.core.registry.fake import InMemoryRegistryStore
from blazinit.core.registry.real import FilesystemRegistryStore
from blazinit.core.registry.sync import SyncResult, sync_registry_if_stale

logger = logging.getLogger(__name__)

_EMPTY_REGISTRY = 'version = "0.0.0"\n'


@dataclass(frozen=True)
class BlazinitContext:
    """Immutable context holding all dependencies for blazinit operations.

    Created at CLI entry point and threaded through the application via
    Click's context object. Frozen to prevent accidental modification at runtime.

    Attributes:
        config_store: Persistence for the configuration record
        registry_store: Bundled and local registry storage
        profile_store: Profile persistence
        config: Configuration loaded at startup (names the default profile)
        config_dir: Directory holding registry cache, config and profiles
        debug: Whether debug logging was requested
    """

    config_store: ConfigStore
    registry_store: RegistryStore
    profile_store: ProfileStore
    config: BlazinitConfig
    config_dir: Path
    debug: bool

    @staticmethod
    def for_test(
        config_store: ConfigStore | None = None,
        registry_store: RegistryStore | None = None,
        profile_store: ProfileStore | None = None,
        config: BlazinitConfig | None = None,
        config_dir: Path | None = None,
        debug: bool = False,
    ) -> "BlazinitContext":
        """Create test context with in-memory defaults for anything unspecified.

        Example:
            >>> registry = InMemoryRegistryStore(bundled=REGISTRY_TOML)
            >>> ctx = BlazinitContext.for_test(registry_store=registry)
            >>> result = runner.invoke(cli, ["add", "git"], obj=ctx)
        """
        resolved_config_store: ConfigStore = (
            config_store if config_store is not None else InMemoryConfigStore(config)
        )
        resolved_config = config if config is not None else resolved_config_store.load()

        return BlazinitContext(
            config_store=resolved_config_store,
            registry_store=(
                registry_store
                if registry_store is not None
                else InMemoryRegistryStore(bundled=_EMPTY_REGISTRY)
            ),
            profile_store=profile_store if profile_store is not None else InMemoryProfileStore(),
            config=resolved_config,
            config_dir=config_dir if config_dir is not None else Path("/fake/blazinit"),
            debug=debug,
        )


def create_context(*, debug: bool, config_dir: Path | None = None) -> BlazinitContext:
    """Create production context with filesystem implementations.

    Args:
        debug: Whether debug logging was requested
        config_dir: Override for the config directory (defaults to default_config_dir())
    """
    resolved_dir = config_dir if config_dir is not None else default_config_dir()
    config_store = FilesystemConfigStore(resolved_dir)

    return BlazinitContext(
        config_store=config_store,
        registry_store=FilesystemRegistryStore(resolved_dir),
        profile_store=FilesystemProfileStore(resolved_dir),
        config=config_store.load(),
        config_dir=resolved_dir,
        debug=debug,
    )


def bootstrap(ctx: BlazinitContext) -> SyncResult:
    """Prepare the config directory before any command runs.

    Ensures the default profile exists and the local registry matches the
    bundled version.

    Raises:
        IOFailureError: If the default profile or registry cannot be written
        MalformedError: If the bundled registry is missing or malformed
    """
    if ensure_default_profile(ctx.profile_store, ctx.config):
        logger.debug("Created default profile %s", ctx.config.default_profile)

    return sync_registry_if_stale(ctx.registry_store)

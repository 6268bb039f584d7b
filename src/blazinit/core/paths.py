"""Config directory discovery and well-known file locations."""

import os
from pathlib import Path

APP_NAME = "blazinit"
REGISTRY_FILENAME = "registry.toml"
CONFIG_FILENAME = "config.toml"
PROFILES_DIRNAME = "profiles"

# Registry snapshot shipped inside the package
BUNDLED_REGISTRY_PATH = Path(__file__).parent.parent / "data" / REGISTRY_FILENAME


def default_config_dir() -> Path:
    """Resolve the directory holding the registry cache, config and profiles.

    Resolution order:
    1. $BLAZINIT_CONFIG_DIR
    2. $XDG_CONFIG_HOME/blazinit
    3. ~/.config/blazinit
    """
    override = os.environ.get("BLAZINIT_CONFIG_DIR")
    if override:
        return Path(override).expanduser()

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home).expanduser() / APP_NAME

    return Path.home() / ".config" / APP_NAME

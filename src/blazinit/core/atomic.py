"""Atomic file replacement."""

import logging
import os
import stat
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def _target_mode(path: Path) -> int:
    """Permission bits the replaced file should end up with.

    mkstemp always creates 0600 files; keep the existing file's mode, or use
    what a plain open() would give a new file under the current umask.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_bytes(path: Path, content: bytes) -> None:
    """Replace the contents of path with content.

    Writes to a temporary file in the destination directory and renames it over
    the target, so a concurrent reader sees either the old file or the new one.
    The temporary file is removed if anything fails.

    Raises:
        OSError: If the directory cannot be created or the write/rename fails
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            os.fchmod(f.fileno(), mode)
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.debug("Wrote %d bytes to %s", len(content), path)


def atomic_write_text(path: Path, content: str) -> None:
    """Text variant of atomic_write_bytes (UTF-8)."""
    atomic_write_bytes(path, content.encode("utf-8"))

"""Tests for atomic file replacement."""

import os
import stat
from pathlib import Path

import pytest

from blazinit.core.atomic import atomic_write_bytes, atomic_write_text


def test_atomic_write_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "file.toml"

    atomic_write_text(target, "x = 1\n")

    assert target.read_text(encoding="utf-8") == "x = 1\n"


def test_atomic_write_replaces_existing_content(tmp_path: Path) -> None:
    target = tmp_path / "file.toml"
    target.write_bytes(b"old")

    atomic_write_bytes(target, b"new")

    assert target.read_bytes() == b"new"
    assert [p.name for p in tmp_path.iterdir()] == ["file.toml"]


def test_atomic_write_cleans_up_on_failure(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    target = tmp_path / "file.toml"
    target.write_bytes(b"old")

    def failing_replace(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", failing_replace)

    with pytest.raises(OSError, match="disk full"):
        atomic_write_bytes(target, b"new")

    assert target.read_bytes() == b"old"
    assert [p.name for p in tmp_path.iterdir()] == ["file.toml"]


def test_atomic_write_keeps_existing_mode(tmp_path: Path) -> None:
    target = tmp_path / "file.toml"
    target.write_bytes(b"old")
    target.chmod(0o644)

    atomic_write_bytes(target, b"new")

    assert stat.S_IMODE(target.stat().st_mode) == 0o644


def test_atomic_write_new_file_follows_umask(tmp_path: Path) -> None:
    target = tmp_path / "file.toml"
    old_umask = os.umask(0o022)
    try:
        atomic_write_bytes(target, b"new")
    finally:
        os.umask(old_umask)

    assert stat.S_IMODE(target.stat().st_mode) == 0o644

"""Shared configuration record, visible to every process on the machine."""

from __future__ import annotations

import fcntl
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

CONFIG_NAME = "loghttpd_config"
DEFAULT_VERBOSITY = 1
_SIZE = 1


class ConfigError(Exception):
    """Raised when the shared configuration cannot be created or opened."""


def _shared_dir() -> Path:
    shm = Path("/dev/shm")
    return shm if shm.is_dir() else Path(tempfile.gettempdir())


def _config_path(name: str | os.PathLike) -> Path:
    path = Path(name)
    if path.parent == Path("."):
        return _shared_dir() / path.name
    return path


@contextmanager
def _open_locked(name: str | os.PathLike, flags: int, lock: int) -> Iterator[int]:
    path = _config_path(name)
    try:
        fd = os.open(path, flags, 0o600)
    except FileExistsError as exc:
        raise ConfigError(f"shared configuration {path} already exists") from exc
    except FileNotFoundError as exc:
        raise ConfigError(f"shared configuration {path} does not exist") from exc
    try:
        fcntl.flock(fd, lock)
        try:
            yield fd
        finally:
            fcntl.flock(fd, fcntl.LOCK_UN)
    finally:
        os.close(fd)


def _check_verbosity(verbosity: int) -> int:
    if not 0 <= verbosity <= 255:
        raise ValueError(f"verbosity must be between 0 and 255, got {verbosity}")
    return verbosity


def init_config(name: str | os.PathLike = CONFIG_NAME) -> None:
    """Create the shared configuration with the default verbosity; fail if it exists."""
    with _open_locked(name, os.O_RDWR | os.O_CREAT | os.O_EXCL, fcntl.LOCK_EX) as fd:
        os.ftruncate(fd, _SIZE)
        os.pwrite(fd, bytes([DEFAULT_VERBOSITY]), 0)


def read_config(name: str | os.PathLike = CONFIG_NAME) -> int:
    """Return the current verbosity from the shared configuration."""
    with _open_locked(name, os.O_RDONLY, fcntl.LOCK_SH) as fd:
        data = os.pread(fd, _SIZE, 0)
    if len(data) != _SIZE:
        raise ConfigError("shared configuration is truncated")
    return data[0]


def update_config(new_verbosity: int, name: str | os.PathLike = CONFIG_NAME) -> None:
    """Store a new verbosity in the shared configuration."""
    value = _check_verbosity(new_verbosity)
    with _open_locked(name, os.O_RDWR, fcntl.LOCK_EX) as fd:
        os.pwrite(fd, bytes([value]), 0)


def remove_config(name: str | os.PathLike = CONFIG_NAME) -> None:
    """Delete the shared configuration if it exists."""
    try:
        _config_path(name).unlink()
    except FileNotFoundError:
        pass
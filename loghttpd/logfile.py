"""Append-only request log with locking, line counting and rotation."""

from __future__ import annotations

import fcntl
import os
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator

LOG_NAME = "http.log"
KEEP = 5


@contextmanager
def _locked(fd: int) -> Iterator[int]:
    fcntl.flock(fd, fcntl.LOCK_EX)
    try:
        yield fd
    finally:
        fcntl.flock(fd, fcntl.LOCK_UN)


def log(text: str, verbosity: int, status: int, filename: str | os.PathLike = LOG_NAME) -> None:
    """Append one timestamped entry to the log under an exclusive lock."""
    entry = f"{datetime.now().astimezone().isoformat()} {verbosity} {text.strip()} {status}\n"
    fd = os.open(filename, os.O_APPEND | os.O_CREAT | os.O_WRONLY, 0o600)
    try:
        with _locked(fd):
            os.write(fd, entry.encode())
    finally:
        os.close(fd)


def _rotated(directory: Path, index: int) -> Path:
    return directory / f"http.{index}.log"


def rotate(directory: str | os.PathLike = ".") -> None:
    """Shift http.N.log files up by one, dropping the oldest, and move http.log to http.1.log."""
    base = Path(directory)
    oldest = _rotated(base, KEEP)
    if oldest.exists():
        oldest.unlink()
    for index in range(KEEP - 1, 0, -1):
        current = _rotated(base, index)
        if current.exists():
            current.rename(_rotated(base, index + 1))
    current_log = base / LOG_NAME
    if current_log.exists():
        current_log.rename(_rotated(base, 1))


def count(filename: str | os.PathLike = LOG_NAME) -> int:
    """Return the number of newline-terminated lines in the log."""
    fd = os.open(filename, os.O_RDONLY)
    try:
        with _locked(fd), os.fdopen(os.dup(fd), "rb") as stream:
            return sum(chunk.count(b"\n") for chunk in iter(lambda: stream.read(65536), b""))
    finally:
        os.close(fd)
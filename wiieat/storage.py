"""Small file helpers for persisting session state."""

from __future__ import annotations

import os
import time


def create_directory(directory: str) -> bool:
    """Create a single directory; return True if it was created."""
    try:
        os.mkdir(directory, 0o777)
    except OSError:
        return False
    return True


def file_exists(path: str) -> bool:
    """Return True if the path can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def read_text(path: str) -> str:
    """Return the file's text, or an empty string if it cannot be read."""
    try:
        with open(path, "rb") as stream:
            return stream.read().decode("utf-8")
    except OSError:
        return ""


def read_bytes(path: str) -> bytes:
    """Return the file's contents; raise FileNotFoundError if it is missing."""
    with open(path, "rb") as stream:
        return stream.read()


def _parent(path: str) -> str | None:
    pos = max(path.rfind("/"), path.rfind("\\"))
    return path[:pos] if pos >= 0 else None


def write_file(path: str, data: str | bytes, append: bool = False) -> None:
    """Write data to a file, creating its immediate parent directory first."""
    parent = _parent(path)
    if parent:
        create_directory(parent)

    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    with open(path, "ab" if append else "wb") as stream:
        stream.write(payload)


def delete_file(path: str) -> bool:
    """Remove a file; return True if it was removed."""
    try:
        os.remove(path)
    except OSError:
        return False
    return True


def time_now(offset: int = 0) -> int:
    """Current time in milliseconds since the epoch, minus the given offset."""
    return time.time_ns() // 1_000_000 - offset
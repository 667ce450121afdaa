"""Utility helpers for working with files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator

CHUNK_SIZE = 1 << 16


def iter_candidates(directories: Iterable[str], name: str) -> Iterator[Path]:
    """Yield ``<directory>/<name>`` for each directory holding such a file."""
    for directory in directories:
        candidate = Path(directory) / name
        if candidate.is_file():
            yield candidate


def stream_file(handle: BinaryIO, out: BinaryIO) -> None:
    """Copy an open binary file to `out` chunk by chunk."""
    for chunk in iter(lambda: handle.read(CHUNK_SIZE), b""):
        out.write(chunk)
    out.flush()


def ensure_dir(path: Path, mode: int = 0o750) -> Path:
    """Create `path` and any missing parents."""
    path.mkdir(mode=mode, parents=True, exist_ok=True)
    return path


def is_plain_filename(name: str) -> bool:
    """Return True when `name` names a file directly inside a directory."""
    if not name or name in (".", "..") or "\x00" in name:
        return False
    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    return not any(sep in name for sep in separators)

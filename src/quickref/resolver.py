"""Look up documents along the search path and stream them out."""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterable, Sequence

from quickref.models import ResolveStats
from quickref.utils.files import iter_candidates, stream_file

LOGGER = logging.getLogger(__name__)


class Resolver:
    """Streams every file matching a requested name, in search path order."""

    def __init__(self, search_path: Sequence[str], out: BinaryIO) -> None:
        self.search_path = tuple(search_path)
        self.out = out

    def resolve(self, names: Iterable[str]) -> ResolveStats:
        stats = ResolveStats()
        for name in names:
            found = self._resolve_one(name)
            if found:
                stats.matches += found
            else:
                stats.missing.append(name)
        return stats

    def _resolve_one(self, name: str) -> int:
        found = 0
        for path in iter_candidates(self.search_path, name):
            LOGGER.debug("Found %s at %s", name, path)
            try:
                handle = path.open("rb")
            except OSError as exc:
                LOGGER.error("Failed to open %s: %s", path, exc)
                continue
            # Opened files count even if streaming breaks off part way.
            found += 1
            with handle:
                try:
                    stream_file(handle, self.out)
                except OSError as exc:
                    LOGGER.error("Failed to read %s: %s", path, exc)
        return found

"""Exceptions raised by quickref."""

from __future__ import annotations


class QuickrefError(Exception):
    """Base class for quickref failures."""


class SyncError(QuickrefError):
    """Raised when refreshing the cache cannot go on."""


class CacheDirError(SyncError):
    """Raised when the cache directory cannot be created."""


class ListingError(SyncError):
    """Raised when the remote listing cannot be fetched or decoded."""


class DownloadError(SyncError):
    """Raised when a single document cannot be fetched or saved."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name

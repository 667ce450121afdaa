"""Refresh the local cache from the remote document repository."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import requests
from pydantic import ValidationError

from quickref.config import AppConfig
from quickref.errors import CacheDirError, DownloadError, ListingError
from quickref.models import DocumentReference, SyncStats
from quickref.utils.files import CHUNK_SIZE, ensure_dir, is_plain_filename

LOGGER = logging.getLogger(__name__)


def fetch_listing(url: str, *, timeout: Optional[float] = None) -> List[DocumentReference]:
    """Fetch and decode the list of documents available remotely."""
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ListingError(f"failed getting document listing: {exc}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise ListingError(f"failed parsing document listing: {exc}") from exc

    if not isinstance(payload, list):
        raise ListingError(
            f"failed parsing document listing: expected an array, got {type(payload).__name__}"
        )

    try:
        return [DocumentReference.model_validate(entry) for entry in payload]
    except ValidationError as exc:
        raise ListingError(f"failed parsing document listing: {exc}") from exc


def download_document(
    reference: DocumentReference, cache_dir: Path, *, timeout: Optional[float] = None
) -> Path:
    """Write the remote content of `reference` to ``cache_dir/<name>``."""
    name = reference.name
    if not is_plain_filename(name):
        raise DownloadError(name, f"refusing to save document with unsafe name {name!r}")

    if not reference.download_url:
        raise DownloadError(name, f"document {name} has no download location")

    try:
        response = requests.get(reference.download_url, stream=True, timeout=timeout)
    except requests.RequestException as exc:
        raise DownloadError(name, f"failed getting document {name}: {exc}") from exc

    target = cache_dir / name
    with response:
        try:
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DownloadError(name, f"failed getting document {name}: {exc}") from exc
        try:
            handle = target.open("wb")
        except (OSError, ValueError) as exc:
            raise DownloadError(name, f"failed opening file for document {target}: {exc}") from exc
        with handle:
            try:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    handle.write(chunk)
            except (requests.RequestException, OSError) as exc:
                raise DownloadError(name, f"failed saving document {name}: {exc}") from exc
    return target


class Syncer:
    """Downloads every listed document into the cache directory."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def sync(self) -> SyncStats:
        cache_dir = self.config.cache_dir
        try:
            ensure_dir(cache_dir)
        except OSError as exc:
            raise CacheDirError(f"failed creating cache directory {cache_dir}: {exc}") from exc

        LOGGER.info("Fetching document listing from %s", self.config.listing_url)
        references = fetch_listing(self.config.listing_url, timeout=self.config.timeout)

        stats = SyncStats()
        for reference in references:
            if reference.download_url is None:
                LOGGER.debug("Skipping %s, it has no download location", reference.name)
                continue
            try:
                path = download_document(reference, cache_dir, timeout=self.config.timeout)
            except DownloadError as exc:
                if self.config.fail_fast:
                    raise
                LOGGER.error("%s", exc)
                stats.record_failure(exc.name, str(exc))
                continue
            LOGGER.debug("Saved %s", path)
            stats.record_success()
        return stats

"""Tests for core data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from quickref.models import DocumentReference, ResolveStats, SyncStats


class TestDocumentReference:
    """Test DocumentReference model."""

    def test_from_listing_entry(self) -> None:
        """Should keep name and download_url and drop everything else."""
        ref = DocumentReference.model_validate(
            {
                "name": "tar",
                "path": "cheat/cheatsheets/tar",
                "sha": "abc123",
                "size": 512,
                "download_url": "https://raw.example.test/tar",
                "type": "file",
            }
        )

        assert ref.name == "tar"
        assert ref.download_url == "https://raw.example.test/tar"
        assert set(ref.model_dump()) == {"name", "download_url"}

    def test_missing_name(self) -> None:
        with pytest.raises(ValidationError):
            DocumentReference.model_validate({"download_url": "https://raw.example.test/tar"})

    def test_null_download_url(self) -> None:
        """Directory entries carry no download location."""
        ref = DocumentReference.model_validate(
            {"name": "subdir", "download_url": None, "type": "dir"}
        )

        assert ref.download_url is None

    def test_is_frozen(self) -> None:
        ref = DocumentReference(name="tar", download_url="u")

        with pytest.raises(ValidationError):
            ref.name = "zip"  # type: ignore[misc]


class TestSyncStats:
    def test_tally(self) -> None:
        stats = SyncStats()
        stats.record_success()
        stats.record_failure("bad", "boom")
        stats.record_success()

        assert stats.downloaded == 2
        assert stats.failed == 1
        assert stats.total == 3
        assert stats.failures == [("bad", "boom")]


class TestResolveStats:
    def test_found_any(self) -> None:
        assert not ResolveStats().found_any
        assert ResolveStats(matches=1).found_any

"""Tests for file utility functions."""

from __future__ import annotations

import io
import stat
from pathlib import Path

from quickref.utils.files import ensure_dir, is_plain_filename, iter_candidates, stream_file


class TestIterCandidates:
    """Test iter_candidates function."""

    def test_yields_in_directory_order(self, tmp_path: Path) -> None:
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        (first / "tar").write_text("one")
        (second / "tar").write_text("two")

        paths = list(iter_candidates([str(second), str(first)], "tar"))

        assert paths == [second / "tar", first / "tar"]

    def test_skips_missing_directories(self, tmp_path: Path) -> None:
        (tmp_path / "tar").write_text("x")

        paths = list(iter_candidates([str(tmp_path / "nope"), str(tmp_path)], "tar"))

        assert paths == [tmp_path / "tar"]

    def test_skips_directories_with_same_name(self, tmp_path: Path) -> None:
        (tmp_path / "tar").mkdir()

        assert list(iter_candidates([str(tmp_path)], "tar")) == []


class TestStreamFile:
    def test_copies_bytes(self, tmp_path: Path) -> None:
        source = tmp_path / "doc"
        source.write_bytes(b"line 1\nline 2\n")
        out = io.BytesIO()

        with source.open("rb") as handle:
            stream_file(handle, out)

        assert out.getvalue() == b"line 1\nline 2\n"

    def test_large_file(self, tmp_path: Path) -> None:
        """Should copy files larger than one chunk."""
        source = tmp_path / "big"
        source.write_bytes(b"x" * (300 * 1024))
        out = io.BytesIO()

        with source.open("rb") as handle:
            stream_file(handle, out)

        assert len(out.getvalue()) == 300 * 1024


class TestEnsureDir:
    def test_creates_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "c"

        ensure_dir(target)

        assert target.is_dir()
        mode = target.stat().st_mode
        assert mode & stat.S_IRWXU == stat.S_IRWXU

    def test_existing_directory(self, tmp_path: Path) -> None:
        ensure_dir(tmp_path)

        assert tmp_path.is_dir()


class TestIsPlainFilename:
    def test_plain(self) -> None:
        assert is_plain_filename("tar")
        assert is_plain_filename("git-commit.md")

    def test_rejected(self) -> None:
        assert not is_plain_filename("")
        assert not is_plain_filename(".")
        assert not is_plain_filename("..")
        assert not is_plain_filename("../etc/passwd")
        assert not is_plain_filename("a/b")
        assert not is_plain_filename("a\x00b")

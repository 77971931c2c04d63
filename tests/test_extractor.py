"""Tests for archive extraction."""

import logging
from pathlib import Path

import pytest
from conftest import build_zip

from workflow_artifacts.core.exceptions import ExtractionFailed
from workflow_artifacts.download.extractor import extract_archive

CENTRAL_HEADER = b"PK\x01\x02"


def patch_central_header(data: bytes, offset: int, value: int) -> bytes:
    """Overwrite a 2-byte field of the first central directory record."""
    start = data.index(CENTRAL_HEADER) + offset
    return data[:start] + value.to_bytes(2, "little") + data[start + 2:]


class TestExtractArchive:
    """Tests for extract_archive."""

    def test_directory_and_file_entries(self, temp_dir: Path) -> None:
        """dir1/ and dir1/file.txt become a directory and a file."""
        out = temp_dir / "out"
        data = build_zip({"dir1/": None, "dir1/file.txt": b"content"})

        written = extract_archive(data, out)

        assert (out / "dir1").is_dir()
        assert (out / "dir1" / "file.txt").read_bytes() == b"content"
        assert written == [out / "dir1/", out / "dir1" / "file.txt"]

    def test_existing_destination(self, temp_dir: Path) -> None:
        """Extraction works when the destination already exists."""
        out = temp_dir / "out"
        out.mkdir()
        extract_archive(build_zip({"dir1/": None, "dir1/file.txt": b"content"}), out)
        assert (out / "dir1" / "file.txt").read_bytes() == b"content"

    def test_creates_nested_destination(self, temp_dir: Path) -> None:
        out = temp_dir / "a" / "b" / "c"
        extract_archive(build_zip({"x.bin": b"\x00\x01"}), out)
        assert (out / "x.bin").read_bytes() == b"\x00\x01"

    def test_missing_parent_directories_created(self, temp_dir: Path) -> None:
        """File entries without directory entries still get their parents."""
        extract_archive(build_zip({"deep/nested/file.txt": b"hi"}), temp_dir)
        assert (temp_dir / "deep" / "nested" / "file.txt").read_text() == "hi"

    def test_overwrites_existing_file(self, temp_dir: Path) -> None:
        (temp_dir / "file.txt").write_text("old")
        extract_archive(build_zip({"file.txt": b"new"}), temp_dir)
        assert (temp_dir / "file.txt").read_text() == "new"

    def test_empty_archive(self, temp_dir: Path) -> None:
        out = temp_dir / "empty"
        assert extract_archive(build_zip({}), out) == []
        assert out.is_dir()

    def test_progress_line_per_entry(self, temp_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="workflow_artifacts.download.extractor"):
            extract_archive(build_zip({"dir1/": None, "dir1/file.txt": b"x"}), temp_dir)

        messages = [r.getMessage() for r in caplog.records]
        assert messages == [
            f"  creating: {temp_dir / 'dir1'}",
            f"  inflating: {temp_dir / 'dir1' / 'file.txt'}",
        ]

    @pytest.mark.parametrize(
        "offset, value",
        [
            (10, 99),  # compression method nobody implements
            (8, 0x1),  # encrypted entry, no password available
        ],
        ids=["unsupported-compression", "encrypted"],
    )
    def test_unreadable_entry(self, temp_dir: Path, offset: int, value: int) -> None:
        """Entries zipfile refuses to inflate fail as ExtractionFailed."""
        data = patch_central_header(build_zip({"f.txt": b"hello"}), offset, value)

        with pytest.raises(ExtractionFailed, match="Malformed archive") as exc_info:
            extract_archive(data, temp_dir / "out")

        assert exc_info.value.entry == "f.txt"
        assert not (temp_dir / "out" / "f.txt").exists()

    def test_malformed_archive(self, temp_dir: Path) -> None:
        with pytest.raises(ExtractionFailed, match="Malformed archive"):
            extract_archive(b"not a zip file", temp_dir / "out")

    def test_entry_escaping_destination(self, temp_dir: Path) -> None:
        out = temp_dir / "out"
        with pytest.raises(ExtractionFailed, match="outside the destination") as exc_info:
            extract_archive(build_zip({"../evil.txt": b"x"}), out)
        assert exc_info.value.entry == "../evil.txt"
        assert not (temp_dir / "evil.txt").exists()

    def test_filesystem_error(self, temp_dir: Path) -> None:
        """A file standing where a directory is needed fails extraction."""
        blocker = temp_dir / "blocked"
        blocker.write_text("file")
        with pytest.raises(ExtractionFailed, match="Failed to write"):
            extract_archive(build_zip({"x.txt": b"x"}), blocker / "sub")

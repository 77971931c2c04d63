"""Zip archive extraction for downloaded artifacts."""

import io
import logging
import zipfile
import zlib
from pathlib import Path

from workflow_artifacts.core.exceptions import ExtractionFailed

logger = logging.getLogger(__name__)


def extract_archive(data: bytes, destination: Path) -> list[Path]:
    """
    Extract a zip archive held in memory into a directory.

    The destination (and its parents) is created if missing. Entries are
    processed in archive order; existing files are overwritten.

    Args:
        data: Raw zip archive bytes
        destination: Directory to extract into

    Returns:
        Paths created or written, in archive order

    Raises:
        ExtractionFailed: If the archive is malformed, an entry escapes the
            destination, or the filesystem rejects a write
    """
    written: list[Path] = []
    entry_name: str | None = None

    try:
        destination.mkdir(parents=True, exist_ok=True)
        root = destination.resolve()

        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            for info in archive.infolist():
                entry_name = info.filename
                target = destination / info.filename
                if not target.resolve().is_relative_to(root):
                    raise ExtractionFailed(
                        "Archive entry points outside the destination",
                        destination=str(destination),
                        entry=entry_name,
                    )

                action = "creating" if info.is_dir() else "inflating"
                logger.info(f"  {action}: {target}")

                if info.is_dir():
                    target.mkdir(parents=True, exist_ok=True)
                else:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    target.write_bytes(archive.read(info))
                written.append(target)
    except (
        zipfile.BadZipFile,
        zipfile.LargeZipFile,
        zlib.error,
        EOFError,
        NotImplementedError,
        RuntimeError,
    ) as e:
        raise ExtractionFailed(
            f"Malformed archive: {e}",
            destination=str(destination),
            entry=entry_name,
        ) from e
    except OSError as e:
        raise ExtractionFailed(
            f"Failed to write archive contents: {e}",
            destination=str(destination),
            entry=entry_name,
        ) from e

    return written

"""Recursive file enumeration and per-file size lookup."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Union

from filetype_report.errors import DirectoryNotFoundError, ScanError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """A discovered file and its byte length at the time it was stat'ed."""

    path: Path
    size: int


def _raise_walk_error(exc: OSError) -> None:
    logger.error("Cannot read directory %s: %s", exc.filename, exc)
    raise ScanError(f"Cannot read directory {exc.filename}: {exc.strerror or exc}") from exc


def _walk(root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            # FIFOs, sockets and devices are skipped; dangling links are kept so stat reports them
            if path.is_symlink() or path.is_file():
                yield path


def enumerate_files(root: Union[str, Path]) -> Iterator[Path]:
    """Return an iterator over every regular file below ``root``.

    ``root`` is validated when this is called; the tree itself is walked
    lazily. Names are sorted at each level so the order is stable between
    runs. Directory symlinks are not followed.

    Args:
        root: Directory to scan

    Returns:
        Iterator of file paths (``root`` joined with the relative location)

    Raises:
        DirectoryNotFoundError: ``root`` does not exist
        ScanError: ``root`` is not a directory, or (during iteration) a
            subdirectory is unreadable
    """
    root_path = Path(root)
    if not root_path.exists():
        raise DirectoryNotFoundError(f"Input folder not found: {root}")
    if not root_path.is_dir():
        raise ScanError(f"Input path is not a directory: {root}")

    logger.info("Scanning %s", root_path)
    return _walk(root_path)


def collect_entries(paths: Iterable[Union[str, Path]]) -> Iterator[FileEntry]:
    """Stat each path and yield its ``FileEntry``.

    A file that vanished or cannot be stat'ed aborts the scan. Paths that
    resolve to something other than a regular file are skipped.
    """
    for path in paths:
        path = Path(path)
        try:
            st = path.stat()
        except OSError as exc:
            logger.error("Cannot read size of %s: %s", path, exc)
            raise ScanError(f"Cannot read size of {path}: {exc.strerror or exc}") from exc
        if not stat.S_ISREG(st.st_mode):
            logger.debug("Skipping non-regular file %s", path)
            continue
        yield FileEntry(path=path, size=st.st_size)

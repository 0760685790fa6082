"""Group files by extension and total their sizes."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple, Union

from filetype_report.scanner import FileEntry, collect_entries

logger = logging.getLogger(__name__)

NO_EXTENSION = "(no extension)"


@dataclass(frozen=True)
class ExtensionGroup:
    extension: str
    count: int
    total_size: int


@dataclass(frozen=True)
class Report:
    """Extension groups ordered by total size, largest first."""

    groups: Tuple[ExtensionGroup, ...] = ()

    @classmethod
    def empty(cls) -> "Report":
        return cls()

    @property
    def total_files(self) -> int:
        return sum(group.count for group in self.groups)

    @property
    def total_size(self) -> int:
        return sum(group.total_size for group in self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[ExtensionGroup]:
        return iter(self.groups)


def classify(path: Union[str, Path]) -> str:
    """Return the extension key for a file path.

    The key is the lowercase text after the last dot of the base name.
    Names without a dot, dotfiles such as ``.bashrc`` and names ending in a
    dot all map to ``NO_EXTENSION``. Bytes of a name that are not valid
    UTF-8 become U+FFFD so the key can always be written to the report.
    """
    extension = os.path.splitext(os.path.basename(path))[1].lower().lstrip(".")
    extension = extension.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return extension or NO_EXTENSION


def aggregate(entries: Iterable[FileEntry]) -> Report:
    """Build a report from file entries in a single pass.

    Groups with equal total size keep the order in which they were first seen.
    """
    # extension -> [count, total_size]; dict keeps first-seen order for ties
    totals: Dict[str, List[int]] = {}
    for entry in entries:
        bucket = totals.setdefault(classify(entry.path), [0, 0])
        bucket[0] += 1
        bucket[1] += entry.size

    groups = sorted(
        (ExtensionGroup(extension=ext, count=count, total_size=size) for ext, (count, size) in totals.items()),
        key=lambda group: group.total_size,
        reverse=True,
    )
    report = Report(groups=tuple(groups))
    logger.info(
        "Aggregated %d files (%d bytes) into %d extension groups",
        report.total_files,
        report.total_size,
        len(report),
    )
    return report


def build_report(paths: Iterable[Union[str, Path]]) -> Report:
    """Stat every path and aggregate the results.

    Raises:
        ScanError: a file's size could not be read
    """
    return aggregate(collect_entries(paths))

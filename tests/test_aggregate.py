"""Tests for extension classification and aggregation.

Tests cover:
- Extension key rules (case folding, dotfiles, trailing dots, multi-dot names)
- Count and size invariants
- Ordering by total size, with stable ties
"""

from __future__ import annotations

from pathlib import Path

import pytest

from filetype_report.aggregate import (
    NO_EXTENSION,
    ExtensionGroup,
    Report,
    aggregate,
    build_report,
    classify,
)
from filetype_report.errors import ScanError
from filetype_report.scanner import FileEntry, enumerate_files


def entry(name: str, size: int) -> FileEntry:
    return FileEntry(path=Path("/data") / name, size=size)


# ============================================================================
# Classification
# ============================================================================


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.TXT", "txt"),
        ("notes.md", "md"),
        ("archive.tar.GZ", "gz"),
        ("Makefile", NO_EXTENSION),
        (".bashrc", NO_EXTENSION),
        ("trailing.", NO_EXTENSION),
        (".config.yaml", "yaml"),
    ],
)
def test_classify(name, expected):
    assert classify(name) == expected


def test_classify_uses_base_name_only():
    assert classify(Path("some.dir") / "README") == NO_EXTENSION
    assert classify("some.dir/child.JSON") == "json"


def test_classify_key_has_no_separator():
    key = classify("photo.JPEG")
    assert key == key.lower()
    assert not key.startswith(".")


# ============================================================================
# Aggregation
# ============================================================================


def test_aggregate_empty():
    report = aggregate([])
    assert report == Report.empty()
    assert len(report) == 0
    assert report.total_files == 0
    assert report.total_size == 0


def test_aggregate_mixed_case_groups():
    report = aggregate([entry("a.TXT", 10), entry("b", 5), entry("c.txt", 20)])

    assert report.groups == (
        ExtensionGroup(extension="txt", count=2, total_size=30),
        ExtensionGroup(extension=NO_EXTENSION, count=1, total_size=5),
    )


def test_aggregate_sums_match_inputs():
    entries = [entry(f"f{i}.{ext}", size) for i, (ext, size) in enumerate(
        [("py", 100), ("md", 3), ("py", 7), ("json", 50), ("MD", 0), ("bin", 4096)]
    )]
    report = aggregate(entries)

    assert report.total_files == len(entries)
    assert report.total_size == sum(e.size for e in entries)
    assert len({g.extension for g in report}) == len(report)


def test_aggregate_orders_by_total_size_descending():
    report = aggregate([entry("a.small", 1), entry("b.big", 500), entry("c.mid", 40), entry("d.mid", 40)])

    sizes = [g.total_size for g in report]
    assert sizes == sorted(sizes, reverse=True)
    assert [g.extension for g in report] == ["big", "mid", "small"]


def test_aggregate_ties_keep_first_seen_order():
    report = aggregate([entry("x.zeta", 10), entry("y.alpha", 10), entry("z.mid", 10)])
    assert [g.extension for g in report] == ["zeta", "alpha", "mid"]


def test_report_is_immutable():
    report = aggregate([entry("a.txt", 1)])
    with pytest.raises(AttributeError):
        report.groups = ()
    with pytest.raises(AttributeError):
        report.groups[0].count = 5


# ============================================================================
# End to end over a real tree
# ============================================================================


def test_build_report_from_directory(tmp_path):
    (tmp_path / "a.TXT").write_bytes(b"x" * 10)
    (tmp_path / "b").write_bytes(b"x" * 5)
    nested = tmp_path / "nested" / "deeper"
    nested.mkdir(parents=True)
    (nested / "c.txt").write_bytes(b"x" * 20)

    report = build_report(enumerate_files(tmp_path))

    assert [(g.extension, g.count, g.total_size) for g in report] == [
        ("txt", 2, 30),
        (NO_EXTENSION, 1, 5),
    ]


def test_build_report_missing_file_aborts(tmp_path):
    with pytest.raises(ScanError):
        build_report([tmp_path / "nope.txt"])


def test_classify_undecodable_name():
    """Undecodable bytes in a name come back as U+FFFD, never as surrogates."""
    assert classify("x.\udcff") == "\ufffd"
    assert classify("photo.JP\udce9G") == "jp\ufffdg"

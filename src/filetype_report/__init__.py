"""File type report

Scans a folder recursively, groups files by extension and writes an HTML
table of per-extension file counts and total sizes.
"""

from filetype_report.aggregate import (
    NO_EXTENSION,
    ExtensionGroup,
    Report,
    aggregate,
    build_report,
    classify,
)
from filetype_report.config import ReportConfig, load_config_from_yaml
from filetype_report.errors import (
    ArgumentError,
    DirectoryNotFoundError,
    ReportError,
    ScanError,
    WriteError,
)
from filetype_report.formatting import format_byte_size
from filetype_report.render import render_html, write_report
from filetype_report.runner import RunOutcome, RunStatus, generate_report, run
from filetype_report.scanner import FileEntry, collect_entries, enumerate_files

__all__ = [
    "ArgumentError",
    "DirectoryNotFoundError",
    "ExtensionGroup",
    "FileEntry",
    "NO_EXTENSION",
    "Report",
    "ReportConfig",
    "ReportError",
    "RunOutcome",
    "RunStatus",
    "ScanError",
    "WriteError",
    "aggregate",
    "build_report",
    "classify",
    "collect_entries",
    "enumerate_files",
    "format_byte_size",
    "generate_report",
    "load_config_from_yaml",
    "render_html",
    "run",
    "write_report",
]

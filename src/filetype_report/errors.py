"""Error taxonomy for report generation."""

from __future__ import annotations


class ReportError(Exception):
    """Base class for every failure the report pipeline reports to the user."""


class ArgumentError(ReportError):
    pass


class ScanError(ReportError):
    """Directory traversal or per-file stat failed."""


class DirectoryNotFoundError(ScanError):
    pass


class WriteError(ReportError):
    """The report file or one of its parent directories could not be written."""

"""
Top-level report run.

``run`` validates the two positional arguments, scans the input folder,
renders the HTML report and writes it. Every failure comes back as a
``RunOutcome`` instead of an exception so callers decide how to surface it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from filetype_report.aggregate import Report, build_report
from filetype_report.config import ReportConfig
from filetype_report.errors import (
    ArgumentError,
    DirectoryNotFoundError,
    ReportError,
    ScanError,
    WriteError,
)
from filetype_report.render import render_html, write_report
from filetype_report.scanner import enumerate_files

logger = logging.getLogger(__name__)


class RunStatus(Enum):
    """Status of a report run"""
    SUCCESS = "success"
    ARGUMENT_ERROR = "argument_error"
    DIRECTORY_NOT_FOUND = "directory_not_found"
    SCAN_ERROR = "scan_error"
    WRITE_ERROR = "write_error"
    INTERNAL_ERROR = "internal_error"


# Most specific first: DirectoryNotFoundError is a ScanError.
_ERROR_STATUS = (
    (ArgumentError, RunStatus.ARGUMENT_ERROR),
    (DirectoryNotFoundError, RunStatus.DIRECTORY_NOT_FOUND),
    (ScanError, RunStatus.SCAN_ERROR),
    (WriteError, RunStatus.WRITE_ERROR),
)


@dataclass
class RunOutcome:
    """Result of a report run"""
    status: RunStatus
    report_path: Optional[Path] = None
    report: Optional[Report] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is RunStatus.SUCCESS

    @classmethod
    def success(cls, report_path: Path, report: Report) -> "RunOutcome":
        """Create success outcome"""
        return cls(status=RunStatus.SUCCESS, report_path=report_path, report=report)

    @classmethod
    def failure(cls, exc: Exception) -> "RunOutcome":
        """Create failure outcome from the exception that ended the run"""
        for error_type, status in _ERROR_STATUS:
            if isinstance(exc, error_type):
                return cls(status=status, error=str(exc))
        return cls(status=RunStatus.INTERNAL_ERROR, error=f"{type(exc).__name__}: {exc}")


def generate_report(
    input_folder: Union[str, Path],
    report_file: Union[str, Path],
    config: Optional[ReportConfig] = None,
) -> Tuple[Path, Report]:
    """Scan ``input_folder`` and write its extension report to ``report_file``.

    Returns:
        Tuple of (resolved report path, aggregated report)

    Raises:
        DirectoryNotFoundError: ``input_folder`` does not exist
        ScanError: traversal or a per-file stat failed
        WriteError: the report could not be written
    """
    config = config or ReportConfig()
    report = build_report(enumerate_files(input_folder))
    markup = render_html(report, config)
    return write_report(markup, report_file), report


def run(argv: Sequence[str], config: Optional[ReportConfig] = None) -> RunOutcome:
    """Run the report for ``[input_folder, report_file]``.

    Args:
        argv: Positional arguments; exactly two are accepted
        config: Report settings (defaults when omitted)

    Returns:
        RunOutcome; no report file is written unless the status is SUCCESS
    """
    try:
        if len(argv) != 2:
            raise ArgumentError("Incorrect number of arguments")
        input_folder, report_file = argv
        report_path, report = generate_report(input_folder, report_file, config)
    except ReportError as exc:
        logger.warning("Report run failed: %s", exc)
        return RunOutcome.failure(exc)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected failure during report run")
        return RunOutcome.failure(exc)

    return RunOutcome.success(report_path, report)

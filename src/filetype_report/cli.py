"""Command line entry point.

Usage:
    filetype-report <folder> <report file>
    python -m filetype_report <folder> <report file>

There are no flags: every token, including one starting with ``-``, is a
positional argument, and a wrong count prints the usage line on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from filetype_report.config import ReportConfig
from filetype_report.runner import RunOutcome, RunStatus, run

PROG = "filetype-report"
USAGE = f"Usage: {PROG} <folder> <report file>"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def setup_logging(config: ReportConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def exit_code(outcome: RunOutcome) -> int:
    if outcome.ok:
        return EXIT_OK
    if outcome.status is RunStatus.ARGUMENT_ERROR:
        return EXIT_USAGE
    return EXIT_FAILURE


def main(argv: Optional[List[str]] = None) -> int:
    """Run the report from the command line and return the exit status."""
    config = ReportConfig()
    setup_logging(config)

    args = sys.argv[1:] if argv is None else list(argv)
    outcome = run(args, config)

    if outcome.ok:
        print(f"Report generated successfully at {outcome.report_path}")
    else:
        print(USAGE)
        print(f"Error: {outcome.error}")
    return exit_code(outcome)

"""HTML rendering and writing of extension reports."""

from __future__ import annotations

import contextlib
import html
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from filetype_report.aggregate import ExtensionGroup, Report
from filetype_report.config import ReportConfig
from filetype_report.errors import WriteError
from filetype_report.formatting import format_byte_size

logger = logging.getLogger(__name__)

HEADERS = ("Type", "Count", "Total Size")


def _render_row(group: ExtensionGroup) -> str:
    return (
        "        <tr>\n"
        f"          <td>{html.escape(group.extension)}</td>\n"
        f'          <td align="right">{group.count}</td>\n'
        f'          <td align="right">{format_byte_size(group.total_size)}</td>\n'
        "        </tr>"
    )


def render_html(report: Report, config: Optional[ReportConfig] = None) -> str:
    """Render a report as a standalone HTML document.

    The body holds one table: a header row followed by one row per group,
    in report order. Count and size cells are right-aligned.

    Args:
        report: Aggregated extension groups
        config: Title and style settings (defaults when omitted)

    Returns:
        The complete document, newline-terminated
    """
    config = config or ReportConfig()

    header_cells = "\n".join(f"          <th>{html.escape(name)}</th>" for name in HEADERS)
    lines: List[str] = [
        "<!DOCTYPE html>",
        "<html>",
        "  <head>",
        f"    <title>{html.escape(config.title)}</title>",
        f"    <style>{html.escape(config.style, quote=False)}</style>",
        "  </head>",
        "  <body>",
        "    <table>",
        "      <thead>",
        "        <tr>",
        header_cells,
        "        </tr>",
        "      </thead>",
    ]
    if report.groups:
        lines.append("      <tbody>")
        lines.extend(_render_row(group) for group in report)
        lines.append("      </tbody>")
    else:
        lines.append("      <tbody></tbody>")
    lines.extend(
        [
            "    </table>",
            "  </body>",
            "</html>",
        ]
    )
    return "\n".join(lines) + "\n"


def _default_file_mode() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


def write_report(markup: str, report_path: Union[str, Path]) -> Path:
    """Write rendered markup to ``report_path`` as UTF-8, creating parent directories.

    The markup goes to a temporary file next to the target, which then
    replaces it, so a failed write leaves any previous report untouched.

    Returns:
        The resolved path of the written file

    Raises:
        WriteError: a parent directory could not be created or the file written
    """
    path = Path(report_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Cannot create directory %s: %s", path.parent, exc)
        raise WriteError(f"Cannot create directory {path.parent}: {exc.strerror or exc}") from exc

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(markup)
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, path)
    except (OSError, UnicodeError) as exc:
        if tmp_name is not None:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
        logger.error("Cannot write report %s: %s", path, exc)
        raise WriteError(f"Cannot write report {path}: {getattr(exc, 'strerror', None) or exc}") from exc

    resolved = path.resolve()
    logger.info("Wrote report to %s", resolved)
    return resolved

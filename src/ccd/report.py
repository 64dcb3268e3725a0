# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Summary totals and text, JSON and XML report rendering."""

import io
import json
import logging
import xml.etree.ElementTree as ET
from typing import Any

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from ccd.config import CheckConfig
from ccd.model import FileReport, RunSummary, Severity

logger = logging.getLogger(__name__)

REPORT_FILE_WIDTH = 160
SEVERITY_LABELS: dict[Severity, str] = {"warning": "Warning", "error": "Error"}
SEVERITY_COLORS: dict[Severity, str] = {"warning": "yellow", "error": "red"}
TABLE_COLUMN_RATIOS: dict[str, int] = {
    "type": 1,
    "line": 1,
    "method": 2,
    "details": 5,
}


def summarize(reports: list[FileReport], files_scanned: int) -> RunSummary:
    """Reduce per-file reports into run totals.

    Args:
        reports: Reports for files with findings.
        files_scanned: Number of files scanned, with or without findings.

    Returns:
        Aggregate totals for the run.
    """
    findings = [finding for report in reports for finding in report.findings]
    error_count = sum(1 for finding in findings if finding.severity == "error")
    return RunSummary(
        files_scanned=files_scanned,
        finding_count=len(findings),
        files_with_findings=len(reports),
        error_count=error_count,
        warning_count=len(findings) - error_count,
    )


def summary_lines(summary: RunSummary) -> list[str]:
    """Build the human readable run summary."""
    lines = [
        "Code documentation check completed.",
        f"Scanned a total of {summary.files_scanned} files.",
    ]
    if summary.files_with_findings:
        lines.append(
            f"Found {summary.finding_count} errors across {summary.files_with_findings} files."
        )
    else:
        lines.append("No errors were detected.")
    return lines


def print_text(reports: list[FileReport], console: Console) -> None:
    """Print one findings table per file.

    Args:
        reports: Reports for files with findings.
        console: Target console; colors follow its settings.
    """
    for report in reports:
        console.rule(Text(report.file_path), style=Style(color="cyan"), characters="-")
        table = Table(show_header=True, show_lines=True, expand=True)
        table.add_column("Type", ratio=TABLE_COLUMN_RATIOS["type"], overflow="fold")
        table.add_column(
            "Line No.",
            ratio=TABLE_COLUMN_RATIOS["line"],
            justify="right",
            overflow="fold",
        )
        table.add_column(
            "Method Name", ratio=TABLE_COLUMN_RATIOS["method"], overflow="fold"
        )
        table.add_column("Details", ratio=TABLE_COLUMN_RATIOS["details"], overflow="fold")
        for finding in report.findings:
            table.add_row(
                Text(
                    SEVERITY_LABELS[finding.severity],
                    style=SEVERITY_COLORS[finding.severity],
                ),
                Text(str(finding.line_number), style="blue"),
                Text(finding.method_name),
                Text(finding.message),
            )
        console.print(table)


def render_text(reports: list[FileReport]) -> str:
    """Render the text report without colors."""
    buffer = io.StringIO()
    console = Console(
        file=buffer, force_terminal=False, color_system=None, width=REPORT_FILE_WIDTH
    )
    print_text(reports, console)
    return buffer.getvalue()


def report_entries(reports: list[FileReport]) -> list[dict[str, Any]]:
    """Convert reports into the ``fileName``/``errors`` report schema.

    Each finding becomes ``{"msg", "type", "lineNumber", "methodName"}`` so
    existing consumers of checkcodedoc reports keep working.
    """
    return [
        {
            "fileName": report.file_path,
            "errors": [
                {
                    "msg": finding.message,
                    "type": finding.severity,
                    "lineNumber": finding.line_number,
                    "methodName": finding.method_name,
                }
                for finding in report.findings
            ],
        }
        for report in reports
    ]


def summary_entry(summary: RunSummary) -> dict[str, int]:
    """Convert run totals into camelCase report keys."""
    return {
        "filesScanned": summary.files_scanned,
        "findingCount": summary.finding_count,
        "filesWithFindings": summary.files_with_findings,
        "errorCount": summary.error_count,
        "warningCount": summary.warning_count,
    }


def render_json(reports: list[FileReport], summary: RunSummary | None = None) -> str:
    """Render reports as an indented JSON document."""
    payload: dict[str, object] = {"files": report_entries(reports)}
    if summary is not None:
        payload["summary"] = summary_entry(summary)
    return json.dumps(payload, indent=2, sort_keys=True)


def render_xml(reports: list[FileReport], summary: RunSummary | None = None) -> str:
    """Render reports as an XML document.

    Layout: ``<files>`` holds one ``<file>`` per report with a ``<fileName>``
    child and an ``<errors>`` list of ``<error>`` elements, each carrying
    ``<msg>``, ``<type>``, ``<lineNumber>`` and ``<methodName>``. Summary
    totals become attributes of ``<files>``.
    """
    root = ET.Element("files")
    if summary is not None:
        for key, value in summary_entry(summary).items():
            root.set(key, str(value))
    for entry in report_entries(reports):
        file_element = ET.SubElement(root, "file")
        ET.SubElement(file_element, "fileName").text = entry["fileName"]
        errors_element = ET.SubElement(file_element, "errors")
        for error in entry["errors"]:
            error_element = ET.SubElement(errors_element, "error")
            for key, value in error.items():
                ET.SubElement(error_element, key).text = str(value)
    ET.indent(root)
    return ET.tostring(root, encoding="utf-8", xml_declaration=True).decode("utf-8")


def write_report(
    reports: list[FileReport], summary: RunSummary, config: CheckConfig, console: Console
) -> str:
    """Render the configured report, echo it and write it to the output file.

    Args:
        reports: Reports for files with findings.
        summary: Run totals.
        config: Active configuration (reporter, output path, verbosity).
        console: Console used for the echo when ``config.verbose`` is set.

    Returns:
        The uncolored report written to ``config.reporter_output``.

    Raises:
        OSError: If the output directory or file cannot be written.
    """
    if config.reporter == "json":
        output = render_json(reports, summary)
    elif config.reporter == "xml":
        output = render_xml(reports, summary)
    else:
        output = render_text(reports)

    if config.verbose:
        if config.reporter == "text":
            print_text(reports, console)
        else:
            console.print(output, markup=False, highlight=False, soft_wrap=True)

    output_path = config.reporter_output
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output, encoding="utf-8")
    logger.info(
        f"Report written (reporter={config.reporter} output_path={output_path} files={len(reports)})"
    )
    return output

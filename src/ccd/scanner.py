# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Line scanner that pairs doc blocks with the declarations they document."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ccd.checker import check_method
from ccd.config import CheckConfig
from ccd.extractor import extract_method_data
from ccd.model import FileReport, Finding
from ccd.signature import match_declaration, match_documented_signature

logger = logging.getLogger(__name__)

BLOCK_OPEN_PATTERN = re.compile(r"^\s+/\*\*\s*$")
BLOCK_CLOSE_PATTERN = re.compile(r"^\s+\*/\s*$")
UNDOCUMENTED_MESSAGE = "Method is not documented, or doc block is malformed"


class BlockState(Enum):
    """Doc block tracking state of the scanner."""

    OUTSIDE_BLOCK = "outside_block"
    INSIDE_BLOCK = "inside_block"


@dataclass(frozen=True)
class ScanResult:
    """Represent the outcome of scanning a list of files.

    Attributes:
        reports: Reports for files with at least one finding, in scan order.
        files_scanned: Number of paths processed, missing files included.
    """

    reports: list[FileReport]
    files_scanned: int


class FileScanner:
    """Scan source text for undocumented and badly documented functions."""

    def __init__(self, config: CheckConfig | None = None) -> None:
        """Initialize scanner.

        Args:
            config: Check configuration. Defaults to built-in defaults.
        """
        self._config = config or CheckConfig()

    def scan(self, text: str) -> list[Finding]:
        """Scan one file's content.

        Args:
            text: Raw file content.

        Returns:
            Findings in line order. A doc block left open at end of file is
            dropped without a finding.
        """
        lines = [line.rstrip("\r") for line in text.split("\n")]
        findings: list[Finding] = []
        state = BlockState.OUTSIDE_BLOCK
        buffer: list[str] = []
        index = 0

        while index < len(lines):
            line = lines[index]

            if state is BlockState.INSIDE_BLOCK:
                buffer.append(line)
                if BLOCK_CLOSE_PATTERN.match(line):
                    state = BlockState.OUTSIDE_BLOCK
                    index += self._close_block(
                        block_text="".join(buffer),
                        lines=lines,
                        close_index=index,
                        findings=findings,
                    )
                    continue

            if BLOCK_OPEN_PATTERN.match(line):
                buffer = [line]
                state = BlockState.INSIDE_BLOCK

            declaration = match_declaration(line)
            if declaration is not None:
                findings.append(
                    Finding(
                        severity="error",
                        message=UNDOCUMENTED_MESSAGE,
                        line_number=index,
                        method_name=declaration.name,
                    )
                )
            index += 1

        return findings

    def _close_block(
        self, block_text: str, lines: list[str], close_index: int, findings: list[Finding]
    ) -> int:
        """Check the signature following a closed block.

        Returns:
            Number of lines to advance. The line after the closing marker is
            always consumed with the block, signature or not.
        """
        signature_index = close_index + 1
        if signature_index >= len(lines):
            return 1
        signature = match_documented_signature(lines[signature_index])
        if signature is None:
            return 2

        method_data = extract_method_data(
            block_text=block_text,
            signature=signature,
            param_doc_pattern=self._config.param_doc_pattern,
        )
        findings.extend(
            check_method(
                method_data=method_data,
                line_number=signature_index,
                method_name=signature.name,
                config=self._config,
            )
        )
        return 2


def scan_files(paths: list[Path], config: CheckConfig | None = None) -> ScanResult:
    """Scan files in order and collect reports for files with findings.

    Args:
        paths: Files to scan, in the order they should be reported.
        config: Check configuration. Defaults to built-in defaults.

    Returns:
        Reports for files with findings and the number of files scanned.
        Every given path counts as scanned, including missing and unreadable
        files, which are logged and skipped.
    """
    scanner = FileScanner(config)
    reports: list[FileReport] = []
    files_scanned = 0

    for file_path in paths:
        files_scanned += 1
        if not file_path.is_file():
            logger.warning(f"Source file not found (path={file_path})")
            continue
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Skipping file due to read failure (path={file_path} error={exc})")
            continue
        findings = scanner.scan(text)
        logger.debug(f"File scanned (path={file_path} findings={len(findings)})")
        if findings:
            reports.append(FileReport(file_path=str(file_path), findings=findings))

    return ScanResult(reports=reports, files_scanned=files_scanned)

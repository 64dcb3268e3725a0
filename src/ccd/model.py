# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for documentation checks."""

from dataclasses import dataclass, field
from typing import Literal

Severity = Literal["warning", "error"]
SignatureKind = Literal["property", "variable", "declaration"]


@dataclass(frozen=True)
class SignatureMatch:
    """Represent one function declaration recognized on a source line.

    Attributes:
        name: Declared name, trimmed of surrounding whitespace.
        params: Raw parameter-list text between the parentheses.
        kind: Which declaration pattern produced the match.
    """

    name: str
    params: str
    kind: SignatureKind


@dataclass(frozen=True)
class ParamDocEntry:
    """Represent one documented parameter tag."""

    type_name: str
    description: str


@dataclass(frozen=True)
class MethodData:
    """Represent documentation extracted for one documented function.

    Attributes:
        method_description: Free-text description lines of the doc block.
        arguments_list: Parameter names split from the signature. A signature
            without parameters yields ``[""]``.
        covered_arguments: Parameter tags found in the doc block, in order.
    """

    method_description: list[str] = field(default_factory=list)
    arguments_list: list[str] = field(default_factory=list)
    covered_arguments: list[ParamDocEntry] = field(default_factory=list)


@dataclass(frozen=True)
class Finding:
    """Represent one documentation issue.

    Attributes:
        severity: ``warning`` or ``error``.
        message: Human readable description of the issue.
        line_number: Line index within the file (0-based).
        method_name: Name of the function the issue belongs to.
    """

    severity: Severity
    message: str
    line_number: int
    method_name: str


@dataclass(frozen=True)
class FileReport:
    """Represent all findings for one scanned file."""

    file_path: str
    findings: list[Finding]


@dataclass(frozen=True)
class RunSummary:
    """Represent aggregate totals for one run."""

    files_scanned: int
    finding_count: int
    files_with_findings: int
    error_count: int
    warning_count: int

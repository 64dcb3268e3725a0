# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Documentation quality rules applied to one documented function."""

from ccd.config import VALID_TYPES, CheckConfig
from ccd.model import Finding, MethodData

SHORT_DESCRIPTION_MESSAGE = "Code doc only contains one line of description"


def check_method(
    method_data: MethodData, line_number: int, method_name: str, config: CheckConfig
) -> list[Finding]:
    """Check extracted documentation against the signature.

    Args:
        method_data: Data extracted from the doc block and signature.
        line_number: Signature line index (0-based).
        method_name: Declared function name.
        config: Active check configuration.

    Returns:
        Findings for this function, possibly empty.
    """
    findings: list[Finding] = []

    if config.short_doc_warnings and len(method_data.method_description) == 1:
        findings.append(
            Finding(
                severity="warning",
                message=SHORT_DESCRIPTION_MESSAGE,
                line_number=line_number,
                method_name=method_name,
            )
        )

    covered = len(method_data.covered_arguments)
    actual = len(method_data.arguments_list)
    if covered != actual and not declares_no_parameters(method_data.arguments_list):
        findings.append(
            Finding(
                severity="error",
                message=(
                    "Documented arguments don't match method signature, "
                    f"{covered} documented, {actual} actual"
                ),
                line_number=line_number,
                method_name=method_name,
            )
        )

    if config.enforce_strict_types:
        for entry in method_data.covered_arguments:
            if entry.type_name not in VALID_TYPES:
                findings.append(
                    Finding(
                        severity="warning",
                        message=f"Documented argument is not a valid type ( {entry.type_name} )",
                        line_number=line_number,
                        method_name=method_name,
                    )
                )

    return findings


def declares_no_parameters(arguments_list: list[str]) -> bool:
    """Return whether a split parameter list comes from an empty signature."""
    return arguments_list == [""]

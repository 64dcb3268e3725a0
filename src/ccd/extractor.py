# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Doc block extraction into description lines and parameter tags."""

import re

from ccd.model import MethodData, ParamDocEntry, SignatureMatch

BLOCK_LINE_PREFIX = "*"
ANNOTATION_PATTERN = re.compile(r"\s*@\w+")


def extract_method_data(
    block_text: str, signature: SignatureMatch, param_doc_pattern: re.Pattern[str]
) -> MethodData:
    """Partition a closed doc block into description and parameter tags.

    The block is split on ``*``. Segments matching ``param_doc_pattern`` are
    parameter tags; other non-blank segments without an ``@tag`` and without a
    ``/`` are description lines.

    Args:
        block_text: Block lines from opening to closing marker, newlines removed.
        signature: Signature declared right after the block.
        param_doc_pattern: Pattern capturing (type, description).

    Returns:
        Extracted method documentation data.
    """
    method_description: list[str] = []
    covered_arguments: list[ParamDocEntry] = []

    for segment in block_text.split(BLOCK_LINE_PREFIX):
        param_match = param_doc_pattern.search(segment)
        if param_match is not None:
            # Tags whose type group did not participate are not counted.
            type_name = param_match.group(1)
            if type_name is not None:
                description = param_match.group(2) or ""
                covered_arguments.append(
                    ParamDocEntry(type_name=type_name, description=description)
                )
            continue
        if _is_description_line(segment):
            method_description.append(segment.strip())

    return MethodData(
        method_description=method_description,
        arguments_list=split_arguments(signature.params),
        covered_arguments=covered_arguments,
    )


def split_arguments(params: str) -> list[str]:
    """Split raw parameter text into parameter names.

    Only the first space of the text is removed before splitting, so
    ``"a, b, c"`` gives ``["a", "b", " c"]`` and ``""`` gives ``[""]``.
    """
    return params.replace(" ", "", 1).split(",")


def _is_description_line(segment: str) -> bool:
    if ANNOTATION_PATTERN.search(segment):
        return False
    if "/" in segment:
        return False
    return bool(segment.strip())

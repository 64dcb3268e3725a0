# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Line-oriented recognition of function assignment declarations.

Matching is a textual heuristic over single lines. Multi-line signatures,
arrow functions and ``function name()`` statements are not recognized.
"""

import re

from ccd.model import SignatureKind, SignatureMatch

# ``name = function(...)`` or ``name: function(...)`` with any left-hand side.
DECLARATION_PATTERN = re.compile(r"\s+(.+)\s*[=:]\sfunction\s*\((.*)\)")
# Object literal member ``name: function(...)``.
PROPERTY_PATTERN = re.compile(r"\s+(\w+):\sfunction\s*\((.*)\)")
# ``var name = function(...)``.
VARIABLE_PATTERN = re.compile(r"\s+(?:var )(.+)\s*[=:]\sfunction\s*\((.*)\)")

COMMENT_PREFIXES = ("*", "/*", "//")


def match_declaration(line: str) -> SignatureMatch | None:
    """Match any function assignment declared on a line.

    Args:
        line: One source line.

    Returns:
        The matched signature, or ``None`` when the line declares nothing.
    """
    return _match(DECLARATION_PATTERN, line, "declaration")


def match_documented_signature(line: str) -> SignatureMatch | None:
    """Match the signature line that follows a closed doc block.

    Object literal members are tried first, ``var`` assignments second.

    Args:
        line: Line directly after the doc block's closing marker.

    Returns:
        The matched signature, or ``None``.
    """
    return _match(PROPERTY_PATTERN, line, "property") or _match(
        VARIABLE_PATTERN, line, "variable"
    )


def is_comment_line(line: str) -> bool:
    """Return whether the line starts a comment or continues a block comment."""
    return line.lstrip().startswith(COMMENT_PREFIXES)


def _match(
    pattern: re.Pattern[str], line: str, kind: SignatureKind
) -> SignatureMatch | None:
    if is_comment_line(line):
        return None
    match = pattern.search(line)
    if match is None:
        return None
    return SignatureMatch(name=match.group(1).strip(), params=match.group(2), kind=kind)

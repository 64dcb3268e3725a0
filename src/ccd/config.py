# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Check configuration, defaults and option merging."""

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal, cast

logger = logging.getLogger(__name__)

Reporter = Literal["text", "json", "xml"]

REPORTERS: tuple[Reporter, ...] = ("text", "json", "xml")
DEFAULT_PARAM_DOC_PATTERN = re.compile(r"@param\s*\{(.+)\}\s(.+)")
DEFAULT_REPORTER_OUTPUT = Path("tmp/output.xml")
VALID_TYPES: frozenset[str] = frozenset(
    {
        "Boolean",
        "Null",
        "Undefined",
        "Number",
        "String",
        "Symbol",
        "Object",
        "Array",
        "Function",
    }
)

# Option keys as written in options files, mapped to CheckConfig fields.
OPTION_ALIASES: dict[str, str] = {
    "paramDocPattern": "param_doc_pattern",
    "shortDocWarnings": "short_doc_warnings",
    "enforceStrictTypes": "enforce_strict_types",
    "reporter": "reporter",
    "reporterOutput": "reporter_output",
    "verbose": "verbose",
    "param_doc_pattern": "param_doc_pattern",
    "short_doc_warnings": "short_doc_warnings",
    "enforce_strict_types": "enforce_strict_types",
    "reporter_output": "reporter_output",
}

_BOOLEAN_FIELDS = {"short_doc_warnings", "enforce_strict_types", "verbose"}


class ConfigError(ValueError):
    """Represent an invalid configuration value or options file."""


@dataclass(frozen=True)
class CheckConfig:
    """Configuration for one documentation check run.

    Attributes:
        param_doc_pattern: Pattern with two capture groups (type, description)
            recognizing a documented parameter.
        short_doc_warnings: Warn when a description has exactly one line.
        enforce_strict_types: Warn on parameter types outside ``VALID_TYPES``.
        reporter: Report format.
        reporter_output: File the report is written to.
        verbose: Echo the report to the console as well.
    """

    param_doc_pattern: re.Pattern[str] = DEFAULT_PARAM_DOC_PATTERN
    short_doc_warnings: bool = True
    enforce_strict_types: bool = True
    reporter: Reporter = "text"
    reporter_output: Path = DEFAULT_REPORTER_OUTPUT
    verbose: bool = True

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any], base: "CheckConfig | None" = None
    ) -> "CheckConfig":
        """Merge option values over a base configuration.

        Args:
            options: Option values keyed by snake_case or camelCase names.
                ``None`` values are ignored.
            base: Configuration to merge over. Defaults to built-in defaults.

        Returns:
            New configuration with the options applied.

        Raises:
            ConfigError: If a key is unknown or a value is invalid.
        """
        config = base or cls()
        changes: dict[str, Any] = {}
        for key, value in options.items():
            if value is None:
                continue
            field_name = OPTION_ALIASES.get(key)
            if field_name is None:
                raise ConfigError(f"Unknown option: {key}")
            changes[field_name] = _coerce(field_name, value)
        if changes:
            logger.debug(f"Configuration options merged (fields={sorted(changes)})")
        return replace(config, **changes)


def load_options_file(path: Path) -> dict[str, Any]:
    """Load check options from a JSON file.

    Args:
        path: Options file path.

    Returns:
        Option values as stored in the file.

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read options file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in options file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Options file must contain a JSON object: {path}")
    return payload


def compile_param_doc_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile and validate a parameter documentation pattern.

    Args:
        pattern: Regular expression text or compiled pattern.

    Returns:
        Compiled pattern with at least two capture groups.

    Raises:
        ConfigError: If the pattern is invalid or captures fewer than two groups.
    """
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    else:
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise ConfigError(f"Invalid parameter doc pattern {pattern!r}: {exc}") from exc
    if compiled.groups < 2:
        raise ConfigError(
            f"Parameter doc pattern needs two capture groups (type, description): {compiled.pattern!r}"
        )
    return compiled


def _coerce(field_name: str, value: Any) -> Any:
    if field_name == "param_doc_pattern":
        if not isinstance(value, (str, re.Pattern)):
            raise ConfigError(f"{field_name} must be a string, got {type(value).__name__}")
        return compile_param_doc_pattern(value)
    if field_name in _BOOLEAN_FIELDS:
        if not isinstance(value, bool):
            raise ConfigError(f"{field_name} must be a boolean, got {value!r}")
        return value
    if field_name == "reporter":
        if value not in REPORTERS:
            raise ConfigError(
                f"Unsupported reporter: {value} (expected one of {', '.join(REPORTERS)})"
            )
        return cast(Reporter, value)
    if field_name == "reporter_output":
        if not isinstance(value, (str, Path)) or not str(value):
            raise ConfigError(f"{field_name} must be a non-empty path, got {value!r}")
        return Path(value)
    raise ConfigError(f"Unknown option: {field_name}")

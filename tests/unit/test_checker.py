# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
from ccd.checker import SHORT_DESCRIPTION_MESSAGE, check_method, declares_no_parameters
from ccd.config import CheckConfig
from ccd.model import MethodData, ParamDocEntry


def _data(
    description: list[str], arguments: list[str], types: list[str]
) -> MethodData:
    return MethodData(
        method_description=description,
        arguments_list=arguments,
        covered_arguments=[ParamDocEntry(type_name=t, description="x") for t in types],
    )


def test_chk_001_complete_documentation_has_no_findings() -> None:
    data = _data(["Line one.", "Line two."], ["a", "b"], ["String", "Number"])

    assert check_method(data, 4, "foo", CheckConfig()) == []


def test_chk_002_single_description_line_warns() -> None:
    findings = check_method(_data(["Only line."], ["a"], ["String"]), 7, "foo", CheckConfig())

    assert len(findings) == 1
    assert findings[0].severity == "warning"
    assert findings[0].message == SHORT_DESCRIPTION_MESSAGE
    assert findings[0].line_number == 7
    assert findings[0].method_name == "foo"


def test_chk_003_short_description_warning_can_be_disabled() -> None:
    config = CheckConfig(short_doc_warnings=False)

    assert check_method(_data(["Only line."], [""], []), 1, "foo", config) == []


def test_chk_004_empty_description_does_not_warn() -> None:
    assert check_method(_data([], [""], []), 1, "foo", CheckConfig()) == []


def test_chk_005_argument_count_mismatch_is_an_error() -> None:
    findings = check_method(_data(["a.", "b."], ["a", "b"], ["String"]), 3, "foo", CheckConfig())

    assert len(findings) == 1
    assert findings[0].severity == "error"
    assert "1 documented, 2 actual" in findings[0].message


def test_chk_006_zero_parameter_signature_is_not_a_mismatch() -> None:
    assert declares_no_parameters([""])
    assert not declares_no_parameters(["a"])
    assert not declares_no_parameters([" "])

    assert check_method(_data(["a.", "b."], [""], []), 3, "foo", CheckConfig()) == []


def test_chk_007_documenting_parameters_of_an_empty_signature_is_not_reported() -> None:
    assert check_method(_data(["a.", "b."], [""], ["String"]), 3, "foo", CheckConfig()) == []


def test_chk_008_invalid_types_warn_once_per_entry() -> None:
    data = _data(["a.", "b."], ["x", "y"], ["Bool", "String"])

    findings = check_method(data, 2, "foo", CheckConfig())

    assert len(findings) == 1
    assert findings[0].severity == "warning"
    assert findings[0].message == "Documented argument is not a valid type ( Bool )"


def test_chk_009_strict_types_can_be_disabled() -> None:
    config = CheckConfig(enforce_strict_types=False)

    assert check_method(_data(["a.", "b."], ["x"], ["int"]), 2, "foo", config) == []


def test_chk_010_checks_are_cumulative_and_ordered() -> None:
    data = _data(["Only line."], ["a", "b", "c"], ["Bool", "Str"])

    findings = check_method(data, 9, "foo", CheckConfig())

    assert [finding.severity for finding in findings] == [
        "warning",
        "error",
        "warning",
        "warning",
    ]
    assert findings[1].message.endswith("2 documented, 3 actual")
    assert "( Str )" in findings[3].message

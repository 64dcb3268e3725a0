# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
from ccd.signature import is_comment_line, match_declaration, match_documented_signature


def test_sig_001_declaration_matches_object_literal_member() -> None:
    match = match_declaration("    render: function (model, options) {")

    assert match is not None
    assert match.name == "render"
    assert match.params == "model, options"
    assert match.kind == "declaration"


def test_sig_002_declaration_keeps_var_keyword_in_name() -> None:
    match = match_declaration("    var build = function(a) {")

    assert match is not None
    assert match.name == "var build"
    assert match.params == "a"


def test_sig_003_declaration_accepts_member_assignment() -> None:
    match = match_declaration("    this.reset = function() {")

    assert match is not None
    assert match.name == "this.reset"
    assert match.params == ""


def test_sig_004_function_calls_and_plain_code_do_not_match() -> None:
    assert match_declaration("    run(function(err) {") is None
    assert match_declaration("    var total = a + b;") is None
    assert match_declaration("    return compute(x, y);") is None


def test_sig_005_comment_lines_never_match() -> None:
    assert match_declaration("     * example: function(a) {}") is None
    assert match_declaration("    // legacy: function(a) {}") is None
    assert match_documented_signature("    /* old: function(a) */") is None
    assert is_comment_line("   * text")
    assert not is_comment_line("    foo: function() {")


def test_sig_006_unindented_declarations_are_not_seen() -> None:
    assert match_declaration("foo: function(a) {") is None


def test_sig_007_documented_signature_prefers_property_form() -> None:
    match = match_documented_signature("    initialize: function(options) {")

    assert match is not None
    assert match.kind == "property"
    assert match.name == "initialize"
    assert match.params == "options"


def test_sig_008_documented_signature_falls_back_to_var_form() -> None:
    match = match_documented_signature("    var helper = function(a, b) {")

    assert match is not None
    assert match.kind == "variable"
    assert match.name == "helper"
    assert match.params == "a, b"


def test_sig_009_documented_signature_requires_property_or_var_shape() -> None:
    assert match_documented_signature("    this.reset = function() {") is None
    assert match_documented_signature("    initialize:function(options) {") is None

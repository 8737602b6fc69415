"""Tests for suite loading and validation."""

import re
import textwrap

import pytest

from domassert.schema_parsing import AssertOp, load_suite, validate_suite_yaml


VALID_SUITE = textwrap.dedent(
    """
    version: 1
    name: Login page
    document:
      path: login.html
      focus: input.email
    steps:
      - id: title
        target: "#title"
        check:
          op: has_text
          value: Welcome to QUnit
      - id: year
        target: .foo
        check:
          op: has_text
          pattern: "[12]\\\\d{3}"
      - id: choices
        target: .choice
        check:
          op: exists
          count: 4
          message: four choices
      - id: nothing
        target: null
        check:
          op: does_not_exist
    """
)


def _errors(yaml_string):
    suite, result = validate_suite_yaml(yaml_string)
    assert suite is None
    return [(e.path, e.message) for e in result.errors]


def _suite_with_check(check_yaml, target='".x"'):
    return textwrap.dedent(
        f"""
        version: 1
        name: s
        document:
          html: "<p></p>"
        steps:
          - id: one
            target: {target}
            check:
        """
    ) + textwrap.indent(textwrap.dedent(check_yaml), " " * 6)


# --- valid suites ---


def test_valid_suite_parses():
    suite, result = validate_suite_yaml(VALID_SUITE)
    assert result.is_valid, str(result)
    assert suite.name == "Login page"
    assert suite.document.path == "login.html"
    assert suite.document.parser == "html.parser"
    assert suite.document.focus == "input.email"

    title, year, choices, nothing = suite.steps
    assert title.check.op == AssertOp.HAS_TEXT
    assert title.check.expected == "Welcome to QUnit"
    assert isinstance(year.check.pattern, re.Pattern)
    assert year.check.pattern.pattern == r"[12]\d{3}"
    assert choices.check.count == 4
    assert choices.check.message == "four choices"
    assert nothing.target is None


def test_load_suite_from_file(tmp_path):
    path = tmp_path / "suite.yaml"
    path.write_text(VALID_SUITE)
    suite, result = load_suite(path)
    assert result.is_valid
    assert len(suite.steps) == 4


def test_load_suite_missing_file(tmp_path):
    suite, result = load_suite(tmp_path / "missing.yaml")
    assert suite is None
    assert "File not found" in str(result)


def test_invalid_yaml_syntax():
    suite, result = validate_suite_yaml("version: [1")
    assert suite is None
    assert "Invalid YAML syntax" in result.errors[0].message


def test_non_mapping_document():
    assert _errors("- a\n- b")[0][1].startswith("Content must be a YAML object")


# --- top level ---


def test_missing_and_unknown_top_level_fields():
    errors = _errors("version: 1\nname: x\nservers: {}\n")
    paths = {path for path, _ in errors}
    assert {"document", "steps", "servers"} <= paths


def test_bad_version():
    errors = _errors(VALID_SUITE.replace("version: 1", "version: zero"))
    assert ("version", "Must be an integer") in errors


def test_document_needs_exactly_one_source():
    errors = _errors(VALID_SUITE.replace("path: login.html", "path: a.html\n  html: '<p></p>'"))
    assert ("document", "Exactly one of 'path' or 'html' is required") in errors


def test_document_unknown_parser():
    errors = _errors(VALID_SUITE.replace("focus: input.email", "parser: regex"))
    assert ("document.parser", "Unsupported HTML parser") in errors


def test_duplicate_step_ids():
    errors = _errors(VALID_SUITE.replace("id: year", "id: title"))
    assert ("steps[1].id", "Duplicate step id") in errors


def test_step_requires_target_key():
    errors = _errors(VALID_SUITE.replace('    target: "#title"\n', ""))
    assert any(path == "steps[0].target" for path, _ in errors)


def test_empty_steps():
    errors = _errors(VALID_SUITE.split("steps:")[0] + "steps: []\n")
    assert ("steps", "Must contain at least one step") in errors


# --- checks ---


def test_unknown_op():
    errors = _errors(_suite_with_check("op: has_attribute\n"))
    assert ("steps[0].check.op", "Invalid assertion operator") in errors


def test_has_class_requires_value():
    errors = _errors(_suite_with_check("op: has_class\n"))
    assert ("steps[0].check.value", "Operator 'has_class' requires a 'value' field") in errors


@pytest.mark.parametrize("op", ["has_text", "has_value"])
def test_expectation_ops_need_exactly_one_of_value_or_pattern(op):
    errors = _errors(_suite_with_check(f"op: {op}\n"))
    assert ("steps[0].check", f"Operator '{op}' requires exactly one of 'value' or 'pattern'") in errors

    errors = _errors(_suite_with_check(f"op: {op}\nvalue: a\npattern: b\n"))
    assert ("steps[0].check", f"Operator '{op}' requires exactly one of 'value' or 'pattern'") in errors


def test_invalid_pattern():
    errors = _errors(_suite_with_check("op: has_text\npattern: '[unclosed'\n"))
    assert any(
        path == "steps[0].check.pattern" and msg.startswith("Invalid regular expression")
        for path, msg in errors
    )


def test_pattern_not_allowed_on_has_class():
    errors = _errors(_suite_with_check("op: has_class\nvalue: a\npattern: b\n"))
    assert ("steps[0].check.pattern", "Operator 'has_class' does not take a 'pattern'") in errors


def test_count_only_on_exists():
    errors = _errors(_suite_with_check("op: is_focused\ncount: 1\n"))
    assert ("steps[0].check.count", "Operator 'is_focused' does not take a 'count'") in errors


@pytest.mark.parametrize("count", ["-1", "'4'", "true"])
def test_count_must_be_non_negative_integer(count):
    errors = _errors(_suite_with_check(f"op: exists\ncount: {count}\n"))
    assert ("steps[0].check.count", "Must be a non-negative integer") in errors


def test_value_must_be_string():
    errors = _errors(_suite_with_check("op: has_value\nvalue: 42\n"))
    assert ("steps[0].check.value", "Value must be a string") in errors
